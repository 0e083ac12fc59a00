"""
vnlunar.engines.year_code
-------------------------
Packed per-year descriptors ("year codes") of the Vietnamese lunar calendar.

Bit layout, LSB first:
  bits 0-3   leap month index (1..12), 0 when the year has no leap month
  bits 4-15  regular month lengths, month 1 in bit 15 down to month 12 in bit 4
             (1 -> 30 days, 0 -> 29 days)
  bit 16     leap month length, same encoding
  bits 17+   day offset of lunar New Year from January 1 of the same civil year

The codes are generated from the astronomical rules of the calendar (UTC+7):
a month starts on the local day of a new moon, month 11 contains the winter
solstice, and in a 13-month span the first month without a major solar term is
the leap month. Tables are built one century at a time and memoised.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from ..core.errors import InvalidStateError, OutOfRangeError
from ..core.time import jdn_from_ymd
from ..reference.constants import MAX_YEAR, MIN_YEAR, TIME_ZONE
from ..reference.lunar import NEW_MOON_EPOCH, SYNODIC_MONTH, new_moon_day
from ..reference.solar import major_term_index

LOGGER = logging.getLogger(__name__)

LEAP_MONTH_MASK = 0xF
OFFSET_SHIFT = 17


@dataclass(frozen=True)
class Lunation:
    """A labelled lunar month as found by the astronomical rules."""
    year: int
    month: int
    leap_month: bool
    start: int  # local JDN of day 1
    length: int


def lunar_month_11(year: int, time_zone: float = TIME_ZONE) -> int:
    """JDN of day 1 of the lunar month containing the winter solstice of ``year``."""
    off = jdn_from_ymd(31, 12, year) - 2415021
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_day(k, time_zone)
    if major_term_index(nm, time_zone) >= 9:  # sun past 270 deg: solstice not reached yet
        nm = new_moon_day(k - 1, time_zone)
    return nm


def leap_month_offset(a11: int, time_zone: float = TIME_ZONE) -> int:
    """Position (counted from month 11) of the first month without a major term."""
    k = math.floor((a11 - NEW_MOON_EPOCH) / SYNODIC_MONTH + 0.5)
    i = 1
    arc = major_term_index(new_moon_day(k + i, time_zone), time_zone)
    while True:
        last = arc
        i += 1
        arc = major_term_index(new_moon_day(k + i, time_zone), time_zone)
        if arc == last or i >= 14:
            break
    return i - 1


def iter_lunations(year: int, time_zone: float = TIME_ZONE) -> Tuple[Lunation, ...]:
    """
    Lunations from month 11 of ``year`` up to (excluding) month 11 of ``year + 1``.

    Months 11 and 12 at the head belong to lunar year ``year``; months 1..10
    belong to ``year + 1``.
    """
    a11 = lunar_month_11(year, time_zone)
    b11 = lunar_month_11(year + 1, time_zone)
    k = math.floor(0.5 + (a11 - NEW_MOON_EPOCH) / SYNODIC_MONTH)

    count = 12
    leap_off = -1
    if b11 - a11 > 365:
        count = 13
        leap_off = leap_month_offset(a11, time_zone)

    starts = [a11] + [new_moon_day(k + i, time_zone) for i in range(1, count)] + [b11]

    out: List[Lunation] = []
    for i in range(count):
        if leap_off == -1 or i < leap_off:
            month = (i + 10) % 12 + 1
        else:
            month = (i + 9) % 12 + 1
        lunar_year = year if (month >= 11 and i < 4) else year + 1
        out.append(Lunation(
            year=lunar_year,
            month=month,
            leap_month=(i == leap_off),
            start=starts[i],
            length=starts[i + 1] - starts[i],
        ))
    return tuple(out)


def encode_year_code(year: int, time_zone: float = TIME_ZONE) -> int:
    """Compute the packed year code of lunar ``year``."""
    months = [
        lun
        for span in (iter_lunations(year - 1, time_zone), iter_lunations(year, time_zone))
        for lun in span
        if lun.year == year
    ]
    return _pack(year, months)


def _pack(year: int, months: List[Lunation]) -> int:
    if not months or months[0].month != 1 or months[0].leap_month:
        raise InvalidStateError(f"Lunar year {year} does not start with month 1")

    leap_month = 0
    leap_bit = 0
    month_bits = 0
    for lun in months:
        if lun.length not in (29, 30):
            raise InvalidStateError(f"Month {lun.month} of {year} has {lun.length} days")
        bit = lun.length - 29
        if lun.leap_month:
            if leap_month:
                raise InvalidStateError(f"Lunar year {year} has two leap months")
            leap_month = lun.month
            leap_bit = bit
        else:
            month_bits |= bit << (12 - lun.month)

    offset = months[0].start - jdn_from_ymd(1, 1, year)
    return (offset << OFFSET_SHIFT) | (leap_bit << 16) | (month_bits << 4) | leap_month


@lru_cache(maxsize=None)
def _century_table(century_start: int) -> Tuple[int, ...]:
    """Year codes for ``century_start .. century_start + 99`` (clipped to the supported range)."""
    first = max(century_start, MIN_YEAR)
    last = min(century_start + 99, MAX_YEAR)
    LOGGER.debug("Building year codes for %d-%d", first, last)

    codes: List[int] = []
    span = iter_lunations(first - 1)
    for year in range(first, last + 1):
        nxt = iter_lunations(year)
        months = [lun for lun in span + nxt if lun.year == year]
        codes.append(_pack(year, months))
        span = nxt
    return tuple(codes)


def get_year_code(year: int) -> int:
    """Packed year code for a lunar year in [MIN_YEAR, MAX_YEAR]."""
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(f"No year code for {year}; supported years are {MIN_YEAR}-{MAX_YEAR}")
    century_start = (year // 100) * 100
    return _century_table(century_start)[year - max(century_start, MIN_YEAR)]
