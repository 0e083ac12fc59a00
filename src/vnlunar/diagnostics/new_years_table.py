from __future__ import annotations

import argparse
from typing import List, Tuple

import vnlunar
from vnlunar.core.types import SolarDate


def mmdd(d: SolarDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def new_year_rows(from_year: int, to_year: int) -> List[Tuple[int, SolarDate, str, int]]:
    """(year, Tet date, year name, leap month) for each lunar year in the span."""
    rows = []
    for Y in range(from_year, to_year + 1):
        tet = vnlunar.new_year_day(Y)
        name = vnlunar.LunarDate(day=1, month=1, year=Y).year_name()
        rows.append((Y, tet, name, vnlunar.leap_month_of(Y)))
    return rows


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the Tet (lunar New Year) date table.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Tet column (default: iso).",
    )
    p.add_argument(
        "--list-month",
        type=int,
        default=0,
        help="After the table, list years whose Tet falls in this solar month (0 = skip).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: SolarDate) -> str:
        return mmdd(d) if args.dates == "mmdd" else str(d)

    headers = ["Year", "Tet", "Name", "Leap"]
    colw = [5, 10, 10, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[int, SolarDate]] = []
    for Y, tet, name, leap in new_year_rows(Y0, Y1):
        leap_s = str(leap) if leap else "-"
        print("  ".join(s.ljust(w) for s, w in zip((str(Y), fmt(tet), name, leap_s), colw)))
        if tet.month == args.list_month:
            hits.append((Y, tet))

    if args.list_month:
        print(f"\nTet occurrences in month={args.list_month:02d}:")
        if not hits:
            print("(none)")
        for Y, tet in hits:
            print(f"{tet}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
