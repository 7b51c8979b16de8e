from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from typing import Optional

from .core.config import load_settings
from .core.errors import AlmanacError, InvalidArgumentError

log = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """'YYYY-MM-DD', year may be negative (astronomical numbering)."""
    m = _DATE_RE.match(s.strip())
    if m is None:
        raise InvalidArgumentError(f"expected YYYY-MM-DD, got {s!r}")
    y, mo, d = (int(g) for g in m.groups())
    return y, mo, d


def _date_arg(args: argparse.Namespace) -> tuple[int, int, int]:
    # a leading "-" parses as an option flag; negative years use --date=-43-03-15
    if args.date is not None and args.date_opt is not None:
        raise InvalidArgumentError("give the date either positionally or with --date, not both")
    s = args.date_opt if args.date_opt is not None else args.date
    if s is None:
        raise InvalidArgumentError("a date is required (YYYY-MM-DD, or --date=YYYY-MM-DD for negative years)")
    return _parse_ymd(s)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, load_settings().log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _fmt(d, pattern: Optional[str]) -> str:
    return d.get_date(pattern or load_settings().date_format)


def cmd_convert(args: argparse.Namespace) -> int:
    import almanac

    d = almanac.make_date(*_date_arg(args), calendar=args.calendar)
    out = almanac.convert(d, args.to)
    log.debug("convert %r -> %r", d, out)
    print(_fmt(out, args.format))
    return 0


def cmd_jd(args: argparse.Namespace) -> int:
    import almanac

    d = almanac.make_date(*_date_arg(args), calendar=args.calendar)
    jd = almanac.to_julian_day(d)
    print(f"JD  = {jd.value:.1f}")
    print(f"JDN = {jd.jdn}")
    return 0


def cmd_from_jd(args: argparse.Namespace) -> int:
    import almanac

    d = almanac.from_julian_day(args.jd, calendar=args.calendar)
    print(_fmt(d, args.format))
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    import almanac

    d = almanac.make_date(*_date_arg(args), calendar=args.calendar)
    d.add_days(args.days)
    print(_fmt(d, args.format))
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    import almanac

    d = almanac.make_date(*_date_arg(args), calendar=args.calendar)
    info = almanac.day_info(d, attributes=tuple(args.attr))
    print(str(info.date))
    print(f"  julian day : {info.julian_day.value:.1f}")
    print(f"  weekday    : {info.weekday} ({info.weekday_name})")
    for k, v in (info.attributes or {}).items():
        print(f"  {k:<11}: {v}")
    return 0


def cmd_today(args: argparse.Namespace) -> int:
    import almanac

    print(_fmt(almanac.today(calendar=args.calendar), args.format))
    return 0


def _add_date_input(p: argparse.ArgumentParser) -> None:
    p.add_argument("date", nargs="?", help="YYYY-MM-DD")
    p.add_argument("--date", dest="date_opt", metavar="YYYY-MM-DD", help="same as the positional; needed for negative years")


def _add_date_args(p: argparse.ArgumentParser, *, fmt: bool = True) -> None:
    p.add_argument("--calendar", default=None, help="julian|gregorian (default: ALMANAC_CALENDAR or gregorian)")
    if fmt:
        p.add_argument("--format", default=None, help="output pattern, e.g. 'EEEE, MMMM d, yyyy'")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="almanac", description="Julian/Gregorian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_conv = sub.add_parser("convert", help="Convert a date to another calendar")
    _add_date_input(p_conv)
    p_conv.add_argument("--to", required=True, help="target calendar")
    _add_date_args(p_conv)

    p_jd = sub.add_parser("jd", help="Julian Day of a date")
    _add_date_input(p_jd)
    _add_date_args(p_jd, fmt=False)

    p_fjd = sub.add_parser("from-jd", help="Date of a Julian Day")
    p_fjd.add_argument("jd", type=float)
    _add_date_args(p_fjd)

    p_add = sub.add_parser("add", help="Add (or with a negative count, subtract) days")
    _add_date_input(p_add)
    p_add.add_argument("days", type=int)
    _add_date_args(p_add)

    p_info = sub.add_parser("info", help="Julian Day, weekday and attributes of a date")
    _add_date_input(p_info)
    p_info.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    _add_date_args(p_info, fmt=False)

    p_today = sub.add_parser("today", help="Today's date in a calendar")
    _add_date_args(p_today)

    sub.add_parser("month", help="Print a month calendar (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "month":
        return _run_module_main("almanac.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "almanac.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    handlers = {
        "convert": cmd_convert,
        "jd": cmd_jd,
        "from-jd": cmd_from_jd,
        "add": cmd_add,
        "info": cmd_info,
        "today": cmd_today,
    }
    try:
        return handlers[args.cmd](args)
    except (AlmanacError, KeyError) as e:
        print(f"almanac: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
