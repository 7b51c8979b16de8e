from __future__ import annotations

import argparse
import random
from typing import List

import almanac
from almanac.core.converter import civil_from_day_number
from almanac.core.types import JulianDayNumber


def parse_calendars(s: str) -> List[str]:
    # "julian,gregorian" -> ["julian", "gregorian"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    jd_start: int,
    jd_end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """Pick random day numbers, go JD -> date -> JD and date -> other -> date."""
    random.seed(seed)
    failures = 0
    others = [c for c in almanac.list_calendars() if c != calendar]

    for _ in range(N):
        jdn = random.randint(jd_start, jd_end)
        d0 = almanac.from_julian_day(JulianDayNumber.from_jdn(jdn), calendar=calendar)

        back = almanac.to_julian_day(d0).jdn
        if back != jdn:
            failures += 1
            print("\nFAIL (jd)")
            print("calendar:", calendar)
            print("jdn:", jdn, "date:", d0, "back:", back)
            if failures >= max_failures:
                return failures

        for other in others:
            there = almanac.convert(d0, other)
            again = almanac.convert(there, calendar)
            if again != d0:
                failures += 1
                print("\nFAIL (cross)")
                print("calendar:", calendar, "via:", other)
                print("d0:", repr(d0), "there:", repr(there), "again:", repr(again))
                if failures >= max_failures:
                    return failures

    return failures


def vector_test(calendar: str, jd_start: int, jd_end: int) -> int:
    """Compare the numpy path against the scalar converter on a whole range."""
    import numpy as np
    from almanac import vector

    system = almanac.get_rules(calendar).system
    step = max(1, (jd_end - jd_start) // 1_000_000)
    jdn = np.arange(jd_start, jd_end + 1, step, dtype=np.int64)
    y, m, d = vector.civil_dates(jdn.astype(np.float64), system)
    back = vector.day_numbers(y, m, d, system)

    failures = int(np.count_nonzero(back != jdn))
    for k in range(0, len(jdn), max(1, len(jdn) // 97)):
        if (int(y[k]), int(m[k]), int(d[k])) != civil_from_day_number(system, int(jdn[k])):
            failures += 1
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JD -> date -> JD, and across calendars.")
    p.add_argument("--calendars", type=str, default="julian,gregorian",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=int, default=-3_000_000, help="First JDN of the sampled range.")
    p.add_argument("--end", type=int, default=6_000_000, help="Last JDN of the sampled range.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    p.add_argument("--vector", action="store_true", help="Also check the numpy path over the whole range.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, jd_start=args.start, jd_end=args.end,
                                     seed=args.seed, max_failures=args.max_failures)
        if args.vector:
            total_fail += vector_test(cal, args.start, args.end)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
