"""
vnlunar.engines.decoder
-----------------------
Unpacks a year code into the ordered list of that year's lunar months.
"""

from __future__ import annotations

from typing import List

from ..core.time import jdn_from_ymd
from ..core.types import LunarMonth
from .year_code import LEAP_MONTH_MASK, OFFSET_SHIFT

MONTH_LENGTHS = (29, 30)


def new_year_jd(year: int, year_code: int) -> int:
    """JDN of lunar New Year (day 1 of month 1) of ``year``."""
    return jdn_from_ymd(1, 1, year) + (year_code >> OFFSET_SHIFT)


def regular_month_lengths(year_code: int) -> List[int]:
    """Lengths of months 1..12; month 12 sits in the lowest of the twelve bits."""
    lengths = [0] * 12
    j = year_code >> 4
    for i in range(12):
        lengths[12 - i - 1] = MONTH_LENGTHS[j & 0x1]
        j >>= 1
    return lengths


def decode_lunar_year(year: int, year_code: int) -> List[LunarMonth]:
    """
    Month descriptors of ``year`` in calendar order (12, or 13 with a leap month).

    The leap month follows the regular month it repeats.
    """
    leap_month = year_code & LEAP_MONTH_MASK
    leap_length = MONTH_LENGTHS[(year_code >> 16) & 0x1]
    leap_year = leap_month != 0
    lengths = regular_month_lengths(year_code)

    months: List[LunarMonth] = []
    jd = new_year_jd(year, year_code)
    for month in range(1, 13):
        length = lengths[month - 1]
        months.append(LunarMonth(year=year, month=month, leap_month=False, jd=jd, leap_year=leap_year, length=length))
        jd += length

        if month == leap_month:
            months.append(LunarMonth(year=year, month=month, leap_month=True, jd=jd, leap_year=leap_year, length=leap_length))
            jd += leap_length

    return months
