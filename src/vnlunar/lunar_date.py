from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional

from .attributes import standard
from .core.errors import InvalidDateError, VnLunarError
from .core.types import CalendarDate, LuckyHour, SolarDate, resolve_field
from .core.validate import is_valid_date
from .engines import calendar

LOGGER = logging.getLogger(__name__)


@dataclass
class LunarDate(CalendarDate):
    """
    A date of the Vietnamese lunar calendar.

    A bare ``LunarDate(day, month, year)`` is unresolved: ``jd``, ``leap_year``
    and ``length`` stay ``None`` until ``init()`` runs. Dates produced by the
    converter arrive fully resolved.
    """
    label: ClassVar[str] = "lunar_calendar"

    leap_month: Optional[bool] = None
    jd: Optional[int] = None
    leap_year: Optional[bool] = None
    length: Optional[int] = None

    def init(self, force_change: bool = False) -> "LunarDate":
        """Validate and fill unset fields from the decoded year (all fields when forced)."""
        if not is_valid_date(self):
            raise InvalidDateError(f"Invalid lunar date {self.year}-{self.month}-{self.day}")

        rcm = calendar.get_recommended(self.day, self.month, self.year, bool(self.leap_month))

        self.leap_month = resolve_field(self.leap_month, rcm["leap_month"], force_change)
        self.leap_year = resolve_field(self.leap_year, rcm["leap_year"], force_change)
        self.jd = resolve_field(self.jd, rcm["jd"], force_change)
        self.length = resolve_field(self.length, rcm["length"], force_change)
        return self

    @property
    def is_resolved(self) -> bool:
        return self.jd is not None

    def set_date(self, day: int, month: int, year: int, leap_month: bool = False) -> None:
        """
        Move this instance to another lunar date.

        The new date is resolved on a separate candidate first; ``self`` only
        changes once that succeeds.
        """
        candidate = LunarDate(day=day, month=month, year=year, leap_month=leap_month)
        try:
            candidate.init(force_change=True)
        except VnLunarError as e:
            LOGGER.debug("Rejected set_date(%r, %r, %r, leap_month=%r): %s", day, month, year, leap_month, e)
            raise InvalidDateError(f"Invalid date {year}-{month}-{day}") from e

        self.set(
            day=candidate.day,
            month=candidate.month,
            year=candidate.year,
            leap_month=candidate.leap_month,
            jd=candidate.jd,
            leap_year=candidate.leap_year,
            length=candidate.length,
        )

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    @staticmethod
    def from_solar_date(date: SolarDate) -> "LunarDate":
        return calendar.from_solar_date(date)

    def to_solar_date(self) -> Optional[SolarDate]:
        return calendar.to_solar_date(self)

    # ---------------------------------------------------------
    # Derived facts
    # ---------------------------------------------------------

    def year_name(self) -> str:
        return standard.year_name(self)

    def month_name(self) -> str:
        return standard.month_name(self)

    def day_name(self) -> Optional[str]:
        return standard.day_name(self)

    def hour_name(self) -> Optional[str]:
        return standard.hour_name(self)

    def day_of_week(self) -> Optional[str]:
        return standard.day_of_week(self)

    def solar_term(self) -> Optional[str]:
        return standard.solar_term(self)

    def lucky_hours(self) -> Optional[List[LuckyHour]]:
        return standard.lucky_hours(self)

    def get(self) -> Dict[str, Any]:
        return {
            **super().get(),
            "year_name": self.year_name(),
            "leap_month": self.leap_month,
        }

    def __str__(self) -> str:
        leap = "L" if self.leap_month else ""
        return f"{self.year:04d}-{self.month:02d}{leap}-{self.day:02d}"
