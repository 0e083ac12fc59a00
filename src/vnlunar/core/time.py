from __future__ import annotations
from typing import Tuple

# First JDN of the Gregorian calendar (1582-10-15). Earlier days use the Julian calendar.
GREGORIAN_REFORM_JDN = 2299161


def jdn_from_ymd(day: int, month: int, year: int) -> int:
    """Civil date -> Julian Day Number (Julian calendar before 1582-10-15)."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if jdn < GREGORIAN_REFORM_JDN:
        jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return jdn


def ymd_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of jdn_from_ymd, returned as (day, month, year)."""
    if jdn >= GREGORIAN_REFORM_JDN:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return day, month, year


def to_jdn(d) -> int:
    """JDN of anything with day/month/year fields (SolarDate, datetime.date)."""
    return jdn_from_ymd(d.day, d.month, d.year)


def is_julian_leap(year: int) -> bool:
    return year % 4 == 0


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_solar_month(month: int, year: int) -> int:
    """Month length, switching leap rule at the 1582 reform."""
    if month == 2:
        leap = is_gregorian_leap(year) if year > 1582 else is_julian_leap(year)
        return 29 if leap else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31
