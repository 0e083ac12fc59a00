from __future__ import annotations

import argparse

from vnlunar.core.types import SolarDate
from vnlunar.engines import calendar
from vnlunar.lunar_date import LunarDate


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_grid(first_jd: int, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    """Lay out (top, bottom) cells in Monday-first weeks starting at ``first_jd``."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first_jd % 7)]  # JDN % 7 == 0 on Mondays
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_month_calendar(Y: int, M: int, is_leap: bool) -> None:
    month = calendar.find_month(calendar.lunar_months(Y), M, is_leap)
    days = []
    for i in range(month.length):
        d = SolarDate.from_jd(month.jd + i)
        days.append((f"{i + 1:2d}", f"{d.month:02d}-{d.day:02d}"))

    name = LunarDate(day=1, month=M, year=Y, leap_month=is_leap).month_name()
    leap_tag = "L" if is_leap else ""
    title = (f"Lunar month  Y={Y}  M={M}{leap_tag}  {name}   "
             f"({SolarDate.from_jd(month.jd)} .. {SolarDate.from_jd(month.last_jd)})")
    print_grid(title, month_grid(month.jd, days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a lunar month as a weekly grid with solar dates.")
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2023 2)")
    p.add_argument("--leap", action="store_true",
                   help="Print the leap instance of the month.")
    args = p.parse_args(argv)

    if not args.lunar:
        lunar_month_calendar(2023, 2, is_leap=False)
        lunar_month_calendar(2023, 2, is_leap=True)
        return 0

    Y, M = args.lunar
    lunar_month_calendar(Y, M, is_leap=args.leap)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
