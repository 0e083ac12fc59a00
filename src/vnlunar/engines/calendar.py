"""
vnlunar.engines.calendar
------------------------
The orchestrator. Locates an absolute JDN inside decoded lunar years and
translates between solar dates and lunar dates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..core.errors import InvalidDateError, InvalidStateError, OutOfRangeError
from ..core.types import LunarMonth, SolarDate
from ..reference.constants import MAX_YEAR
from .decoder import decode_lunar_year
from .year_code import get_year_code

if TYPE_CHECKING:
    from ..lunar_date import LunarDate

LOGGER = logging.getLogger(__name__)


def lunar_months(year: int) -> List[LunarMonth]:
    """Freshly decoded months of lunar ``year``."""
    return decode_lunar_year(year, get_year_code(year))


def find_lunar_date(jd: int, months: Sequence[LunarMonth]) -> "LunarDate":
    """Resolve ``jd`` against an ordered month list of one lunar year."""
    from ..lunar_date import LunarDate

    if len(months) == 0 or months[0].jd is None:
        raise InvalidStateError("Lunar months data is invalid or empty")
    if jd < months[0].jd:
        raise OutOfRangeError(f"JDN {jd} precedes the first month (JDN {months[0].jd})")

    index = len(months) - 1
    while jd < months[index].jd:
        index -= 1

    ref = months[index]
    offset = jd - ref.jd
    return LunarDate(
        day=ref.day + offset,
        month=ref.month,
        year=ref.year,
        leap_month=ref.leap_month,
        jd=jd,
        leap_year=ref.leap_year,
        length=ref.length,
    )


def from_solar_date(solar: SolarDate) -> "LunarDate":
    """
    Solar -> lunar. January/February days before Tet belong to the previous lunar year.

    Early-January days of the year after MAX_YEAR still belong to lunar MAX_YEAR;
    anything past its last month raises OutOfRangeError.
    """
    year = min(solar.year, MAX_YEAR)
    months = lunar_months(year)
    jd = SolarDate.jdn(solar)

    if jd < months[0].jd:
        LOGGER.debug("%s precedes lunar new year of %d; using %d", solar, year, year - 1)
        months = lunar_months(year - 1)
    if jd > months[-1].last_jd:
        raise OutOfRangeError(f"{solar} is past the last supported lunar month ({months[-1].year}/{months[-1].month})")
    return find_lunar_date(jd, months)


def to_solar_date(lunar: "LunarDate") -> Optional[SolarDate]:
    """Lunar -> solar, or None while the lunar date has no JDN."""
    if lunar.jd is None:
        return None
    return SolarDate.from_jd(lunar.jd)


def find_month(months: Sequence[LunarMonth], month: int, leap_month: bool = False) -> LunarMonth:
    """Pick the regular or the leap instance of ``month``."""
    for i, m in enumerate(months):
        if m.month != month:
            continue
        if not leap_month:
            return m
        if i + 1 < len(months) and months[i + 1].month == month:
            return months[i + 1]
        raise InvalidDateError(f"Month {month} of {m.year} is not a leap month")
    raise InvalidStateError(f"Month {month} missing from decoded year")


def get_recommended(day: int, month: int, year: int, leap_month: bool = False) -> Dict[str, Any]:
    """
    Resolved fields for a lunar (day, month, year): jd, leap_month, leap_year, length.

    Raises InvalidDateError if ``day`` exceeds the month length or the
    requested leap month does not exist.
    """
    ref = find_month(lunar_months(year), month, leap_month)
    if day > ref.length:
        raise InvalidDateError(f"Lunar month {month}/{year} has only {ref.length} days")

    return {
        "day": day,
        "month": month,
        "year": year,
        "jd": ref.jd + day - 1,
        "leap_month": ref.leap_month,
        "leap_year": ref.leap_year,
        "length": ref.length,
    }
