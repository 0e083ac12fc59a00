from __future__ import annotations
from typing import List, Optional

from ..core.types import LuckyHour
from ..reference.constants import CAN, CHI, DAY, LEAP_SUFFIX, LUCKY_HOURS, SOLAR_TERMS, TIME_ZONE
from ..reference.solar import solar_term_index
from .registry import register_attribute

# Everything below reads (year, month, jd, leap_month) off a lunar date.
# Day-level facts need jd and give None while it is unset.

def year_name(lunar) -> str:
    return CAN[(lunar.year + 6) % 10] + " " + CHI[(lunar.year + 8) % 12]

def month_name(lunar) -> str:
    name = CAN[(lunar.year * 12 + lunar.month + 3) % 10] + " " + CHI[(lunar.month + 1) % 12]
    if lunar.leap_month:
        name += LEAP_SUFFIX
    return name

def day_name(lunar) -> Optional[str]:
    if lunar.jd is None:
        return None
    return CAN[(lunar.jd + 9) % 10] + " " + CHI[(lunar.jd + 1) % 12]

def hour_name(lunar) -> Optional[str]:
    """Stem of the first (Tý) hour of the day; the branch is always Tý."""
    if lunar.jd is None:
        return None
    return CAN[((lunar.jd - 1) * 2) % 10] + " " + CHI[0]

def day_of_week(lunar) -> Optional[str]:
    if lunar.jd is None:
        return None
    return DAY[(lunar.jd + 1) % 7]

def solar_term(lunar) -> Optional[str]:
    # Segment in effect at the end of the local day.
    if lunar.jd is None:
        return None
    return SOLAR_TERMS[solar_term_index(lunar.jd + 1, TIME_ZONE)]

def lucky_hours(lunar) -> Optional[List[LuckyHour]]:
    if lunar.jd is None:
        return None
    chi_of_day = (lunar.jd + 1) % 12
    pattern = LUCKY_HOURS[chi_of_day % 6]

    hours: List[LuckyHour] = []
    for i in range(12):
        if pattern[i] == "1":
            hours.append(LuckyHour(name=CHI[i], time=((i * 2 + 23) % 24, (i * 2 + 1) % 24)))
    return hours

register_attribute("year_name", year_name)
register_attribute("month_name", month_name)
register_attribute("day_name", day_name)
register_attribute("hour_name", hour_name)
register_attribute("day_of_week", day_of_week)
register_attribute("solar_term", solar_term)
register_attribute("lucky_hours", lucky_hours)
