from __future__ import annotations
from dataclasses import dataclass, fields
from datetime import date
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from .errors import InvalidDateError
from .time import GREGORIAN_REFORM_JDN, days_in_solar_month, to_jdn, ymd_from_jdn


@dataclass
class CalendarDate:
    """Mutable {day, month, year} shared by both calendar families."""
    label: ClassVar[str] = "calendar"

    day: int
    month: int
    year: int

    def set(self, **values: Any) -> None:
        names = {f.name for f in fields(self)}
        for key, value in values.items():
            if key not in names:
                raise AttributeError(f"{type(self).__name__} has no field '{key}'")
            setattr(self, key, value)

    def get(self) -> Dict[str, Any]:
        return {"day": self.day, "month": self.month, "year": self.year}


@dataclass(frozen=True)
class SolarDate:
    """Civil solar date: Julian calendar before 1582-10-15, Gregorian from then on."""
    label: ClassVar[str] = "solar_calendar"

    day: int
    month: int
    year: int

    def __post_init__(self) -> None:
        if not SolarDate.is_valid_date(self.day, self.month, self.year):
            raise InvalidDateError(f"Invalid solar date {self.year:04d}-{self.month:02d}-{self.day:02d}")

    @staticmethod
    def is_valid_date(day: int, month: int, year: int) -> bool:
        if year < 1 or not (1 <= month <= 12):
            return False
        if not (1 <= day <= days_in_solar_month(month, year)):
            return False
        # 1582-10-05 .. 1582-10-14 were skipped by the reform.
        if year == 1582 and month == 10 and 5 <= day <= 14:
            return False
        return True

    @staticmethod
    def jdn(d: Union["SolarDate", date]) -> int:
        return to_jdn(d)

    @staticmethod
    def from_jd(jdn: int) -> "SolarDate":
        day, month, year = ymd_from_jdn(jdn)
        return SolarDate(day, month, year)

    @classmethod
    def from_date(cls, d: date) -> "SolarDate":
        return cls(d.day, d.month, d.year)

    def to_date(self) -> date:
        """datetime.date is proleptic Gregorian, so pre-reform dates are refused."""
        if SolarDate.jdn(self) < GREGORIAN_REFORM_JDN:
            raise InvalidDateError(f"{self} is a Julian calendar date")
        return date(self.year, self.month, self.day)

    def get(self) -> Dict[str, int]:
        return {"day": self.day, "month": self.month, "year": self.year}

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class LunarMonth:
    """One decoded lunar month: its first day, anchored to an absolute JDN."""
    year: int
    month: int
    leap_month: bool
    jd: int
    leap_year: bool
    length: int  # 29 or 30
    day: int = 1

    @property
    def last_jd(self) -> int:
        return self.jd + self.length - 1

    def as_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "leap_month": self.leap_month,
            "jd": self.jd,
            "leap_year": self.leap_year,
            "length": self.length,
        }


@dataclass(frozen=True)
class LuckyHour:
    name: str
    time: Tuple[int, int]  # (start hour, end hour), end = (start + 2) % 24


def resolve_field(existing: Optional[Any], recommended: Any, force: bool = False) -> Any:
    """First write wins unless forced. ``None`` marks a field that was never set."""
    if force or existing is None:
        return recommended
    return existing
