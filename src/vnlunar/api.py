from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .attributes import STANDARD_ATTRIBUTES, compute_attributes
from .core.errors import InvalidDateError
from .core.types import SolarDate
from .core.validate import is_valid_date
from .engines import calendar
from .engines.decoder import new_year_jd
from .engines.year_code import LEAP_MONTH_MASK, get_year_code
from .lunar_date import LunarDate
from .reference.constants import MAX_YEAR, MIN_YEAR

LOGGER = logging.getLogger(__name__)


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateError(f"Lunar year {year} outside {MIN_YEAR}-{MAX_YEAR}")

@lru_cache(maxsize=1)
def supported_jd_range() -> Tuple[int, int]:
    """First and last JDN that convert to a valid lunar date."""
    first = calendar.get_recommended(14, 1, MIN_YEAR)["jd"]
    last = calendar.get_recommended(14, 11, MAX_YEAR)["jd"]
    return first, last

def supported_range() -> Tuple[SolarDate, SolarDate]:
    first, last = supported_jd_range()
    return SolarDate.from_jd(first), SolarDate.from_jd(last)

# ============================================================
# Conversion
# ============================================================

def convert_solar_to_lunar(day: int, month: int, year: int) -> LunarDate:
    """Solar (day, month, year) -> resolved LunarDate."""
    solar = SolarDate(day, month, year)
    jd = SolarDate.jdn(solar)
    first, last = supported_jd_range()
    if jd < first or jd > last:
        raise InvalidDateError(f"{solar} is outside the supported range")
    return LunarDate.from_solar_date(solar)

def convert_lunar_to_solar(lunar: LunarDate) -> Optional[SolarDate]:
    return lunar.to_solar_date()

def lunar_date(day: int, month: int, year: int, leap_month: bool = False) -> LunarDate:
    """Build and resolve a lunar date."""
    return LunarDate(day=day, month=month, year=year, leap_month=leap_month).init()

def day_info(solar: SolarDate, *, attributes: Sequence[str] = STANDARD_ATTRIBUTES) -> Dict[str, Any]:
    lunar = convert_solar_to_lunar(solar.day, solar.month, solar.year)
    out: Dict[str, Any] = {
        "solar": str(solar),
        "jd": lunar.jd,
        "lunar": {
            "day": lunar.day,
            "month": lunar.month,
            "year": lunar.year,
            "leap_month": lunar.leap_month,
            "leap_year": lunar.leap_year,
            "month_length": lunar.length,
        },
    }
    out.update(compute_attributes(lunar, attributes))
    return out

# ============================================================
# Year-level helpers
# ============================================================

def months_in_year(year: int) -> List[Dict[str, Any]]:
    _check_year(year)
    out = []
    for m in calendar.lunar_months(year):
        rec = m.as_dict()
        rec["first_date"] = SolarDate.from_jd(m.jd)
        rec["last_date"] = SolarDate.from_jd(m.last_jd)
        out.append(rec)
    return out

def new_year_day(year: int) -> SolarDate:
    """Solar date of Tet, lunar 1/1 of ``year``."""
    _check_year(year)
    return SolarDate.from_jd(new_year_jd(year, get_year_code(year)))

def leap_month_of(year: int) -> int:
    """Leap month number of ``year``, 0 if none."""
    _check_year(year)
    return get_year_code(year) & LEAP_MONTH_MASK

def days_in_month(year: int, month: int, *, leap_month: bool = False) -> int:
    _check_year(year)
    if not 1 <= month <= 12:
        raise InvalidDateError(f"Invalid lunar month {month}")
    return calendar.find_month(calendar.lunar_months(year), month, leap_month).length

def is_valid_lunar_date(day: int, month: int, year: int, leap_month: bool = False) -> bool:
    """Structural check plus month length and leap-month existence."""
    if not is_valid_date(LunarDate(day=day, month=month, year=year)):
        return False
    try:
        calendar.get_recommended(day, month, year, leap_month)
    except InvalidDateError:
        return False
    return True
