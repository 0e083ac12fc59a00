from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str):
    from vnlunar.core.types import SolarDate

    y, m, d = map(int, s.split("-"))
    return SolarDate(d, m, y)


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


def _print_lunar(lunar) -> None:
    leap = " (nhuận)" if lunar.leap_month else ""
    print(f"Lunar date : {lunar.day:02d}/{lunar.month:02d}{leap}/{lunar.year}")
    print(f"Solar date : {lunar.to_solar_date()}   JDN {lunar.jd}")
    print(f"Weekday    : {lunar.day_of_week()}")
    print(f"Year       : {lunar.year_name()}")
    print(f"Month      : {lunar.month_name()}  ({lunar.length} days)")
    print(f"Day        : {lunar.day_name()}")
    print(f"Hour (Tý)  : {lunar.hour_name()}")
    print(f"Solar term : {lunar.solar_term()}")
    hours = ", ".join(f"{h.name} ({h.time[0]}-{h.time[1]})" for h in lunar.lucky_hours())
    print(f"Lucky hours: {hours}")


def cmd_day(argv: list[str]) -> int:
    import vnlunar

    p = argparse.ArgumentParser(prog="vnlunar day", description="Solar -> lunar date with derived facts")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    try:
        solar = _parse_ymd(args.date)
        lunar = vnlunar.convert_solar_to_lunar(solar.day, solar.month, solar.year)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    _print_lunar(lunar)
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import vnlunar

    p = argparse.ArgumentParser(prog="vnlunar lunar", description="Lunar -> solar date with derived facts")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="the leap instance of the month")
    args = p.parse_args(argv)

    try:
        lunar = vnlunar.lunar_date(args.day, args.month, args.year, leap_month=args.leap)
    except vnlunar.InvalidDateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    _print_lunar(lunar)
    return 0


def cmd_year(argv: list[str]) -> int:
    import vnlunar

    p = argparse.ArgumentParser(prog="vnlunar year", description="List the lunar months of a year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    try:
        months = vnlunar.months_in_year(args.year)
    except vnlunar.InvalidDateError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    name = vnlunar.LunarDate(day=1, month=1, year=args.year).year_name()
    leap = vnlunar.leap_month_of(args.year)
    print(f"Lunar year {args.year} ({name}), leap month: {leap or '-'}")
    print("Month  Days  First day   Last day    JDN")
    for m in months:
        tag = "L" if m["leap_month"] else " "
        print(f"{m['month']:>4}{tag}  {m['length']:>4}  {m['first_date']!s:<10}  {m['last_date']!s:<10}  {m['jd']}")
    return 0


def cmd_solar_term(argv: list[str]) -> int:
    from vnlunar.reference import solar
    from vnlunar.reference.constants import SOLAR_TERMS, TIME_ZONE

    p = argparse.ArgumentParser(prog="vnlunar solar-term", description="Sun longitude and solar term for a JDN.")
    p.add_argument("jdn", type=int, help="Julian Day Number of the local day")
    p.add_argument("--tz", type=float, default=TIME_ZONE, help="Time zone offset in hours (default: 7)")
    args = p.parse_args(argv)

    jd = args.jdn - 0.5 - args.tz / 24.0
    lon = solar.sun_longitude(jd)
    idx = solar.solar_term_index(args.jdn, args.tz)
    print(f"JD (local midnight, UT) = {jd:.6f}")
    print(f"Apparent sun longitude  = {lon:.8f} rad")
    print(f"Solar term              = {idx} {SOLAR_TERMS[idx]}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if "-v" in argv or "--verbose" in argv:
        argv = [a for a in argv if a not in ("-v", "--verbose")]
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Shorthand: `vnlunar YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="vnlunar", description="Vietnamese lunar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Solar -> lunar date")
    sub.add_parser("lunar", help="Lunar -> solar date")
    sub.add_parser("year", help="List lunar months of a year")
    sub.add_parser("solar-term", help="Sun longitude and solar term for a JDN")

    sub.add_parser("new-years", help="Print Tet date table (diagnostics)")
    sub.add_parser("pretty-month", help="Print a lunar month grid (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip", "leap-months"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "lunar":
        return cmd_lunar(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "solar-term":
        return cmd_solar_term(rest)

    if args.cmd == "new-years":
        return _run_module_main("vnlunar.diagnostics.new_years_table", rest)

    if args.cmd == "pretty-month":
        return _run_module_main("vnlunar.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "vnlunar.diagnostics.round_trip",
            "leap-months": "vnlunar.diagnostics.leap_months",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
