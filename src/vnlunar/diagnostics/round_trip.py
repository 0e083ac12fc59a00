from __future__ import annotations

import argparse
import random

import vnlunar
from vnlunar.core.types import SolarDate


def parse_date(s: str) -> SolarDate:
    y, m, d = s.split("-")
    return SolarDate(int(d), int(m), int(y))


def random_date(start_jd: int, end_jd: int) -> SolarDate:
    return SolarDate.from_jd(random.randint(start_jd, end_jd))


def roundtrip_test(N: int, start: SolarDate, end: SolarDate, seed: int, *, max_failures: int) -> int:
    """Convert N random solar dates to lunar and back; return the number of mismatches."""
    random.seed(seed)
    failures = 0
    lo, hi = vnlunar.api.supported_jd_range()
    start_jd = max(SolarDate.jdn(start), lo)
    end_jd = min(SolarDate.jdn(end), hi)

    for _ in range(N):
        d0 = random_date(start_jd, end_jd)

        lunar = vnlunar.convert_solar_to_lunar(d0.day, d0.month, d0.year)
        back = vnlunar.convert_lunar_to_solar(lunar)

        again = vnlunar.lunar_date(lunar.day, lunar.month, lunar.year, leap_month=bool(lunar.leap_month))
        if back != d0 or again.jd != lunar.jd:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("lunar:", repr(lunar))
            print("back:", back)
            print("re-resolved:", repr(again))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: solar -> lunar -> solar.")
    p.add_argument("--N", type=int, default=2000, help="Number of trials.")
    p.add_argument("--start", type=str, default="1200-03-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2199-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if SolarDate.jdn(end) < SolarDate.jdn(start):
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
