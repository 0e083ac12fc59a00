"""Calendar facts derived from a resolved lunar date."""

from . import standard as _standard  # noqa: F401  (registers the standard attributes)
from .registry import compute_attributes, list_attributes, register_attribute

STANDARD_ATTRIBUTES = (
    "year_name",
    "month_name",
    "day_name",
    "hour_name",
    "day_of_week",
    "solar_term",
    "lucky_hours",
)

__all__ = ["compute_attributes", "list_attributes", "register_attribute", "STANDARD_ATTRIBUTES"]
