"""Print a month grid, optionally with the matching days of a second calendar."""

from __future__ import annotations

import argparse
from typing import List, Optional

import almanac


def dow_header(calendar: str) -> str:
    info = almanac.calendar_info(calendar)
    return " ".join(name[:2].ljust(5) for name in info["weekday_names"]).rstrip()


def render_month(calendar: str, year: int, month: int, *, other: Optional[str] = None) -> List[str]:
    """
    Lines of a month grid. With ``other`` each cell also shows the same day in
    the other calendar as MM-DD.
    """
    rules = almanac.get_rules(calendar)
    title = f"{rules.name}  {rules.month_name(month)} {year}"
    if other:
        title += f"   (lower row: {almanac.get_rules(other).name})"
    header = dow_header(calendar)
    lines = [title, header, "-" * len(header)]

    for week in almanac.month_calendar(year, month, calendar=calendar):
        top = []
        bot = []
        for day in week:
            if day is None:
                top.append("".ljust(5))
                bot.append("".ljust(5))
                continue
            top.append(f"{day:2d}".ljust(5))
            if other:
                o = almanac.convert(almanac.make_date(year, month, day, calendar=calendar), other)
                bot.append(f"{o.month:02d}-{o.day:02d}")
        lines.append(" ".join(top).rstrip())
        if other:
            lines.append(" ".join(bot).rstrip())
    return lines


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a month calendar, optionally paired with another calendar.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default=None, help="julian|gregorian (default: ALMANAC_CALENDAR or gregorian)")
    p.add_argument("--other", default=None, help="Second calendar shown under each day.")
    args = p.parse_args(argv)

    calendar = args.calendar or almanac.get_rules().system.value
    for line in render_month(calendar, args.year, args.month, other=args.other):
        print(line)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
