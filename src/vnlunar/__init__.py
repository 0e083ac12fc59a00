"""vnlunar public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    convert_solar_to_lunar,
    convert_lunar_to_solar,
    lunar_date,
    day_info,
    months_in_year,
    new_year_day,
    leap_month_of,
    days_in_month,
    is_valid_lunar_date,
    supported_range,
)
from .core.errors import InvalidDateError, InvalidStateError, OutOfRangeError, VnLunarError
from .core.types import CalendarDate, LuckyHour, LunarMonth, SolarDate
from .lunar_date import LunarDate

__all__ = [
    "convert_solar_to_lunar",
    "convert_lunar_to_solar",
    "lunar_date",
    "day_info",
    "months_in_year",
    "new_year_day",
    "leap_month_of",
    "days_in_month",
    "is_valid_lunar_date",
    "supported_range",
    "CalendarDate",
    "LunarDate",
    "LunarMonth",
    "LuckyHour",
    "SolarDate",
    "VnLunarError",
    "InvalidDateError",
    "InvalidStateError",
    "OutOfRangeError",
]
