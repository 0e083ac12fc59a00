from __future__ import annotations

from ..reference.constants import MAX_YEAR, MIN_YEAR


def is_valid_date(date) -> bool:
    """
    Structural check of a lunar {day, month, year}.

    Month lengths (29/30) are checked later, against the decoded year. The
    reference tables start at lunar 1200-01-14 and end at lunar 2199-11-14.
    """
    if date.day < 1 or date.day > 30:
        return False
    if date.month < 1 or date.month > 12:
        return False

    if date.year < MIN_YEAR or date.year > MAX_YEAR:
        return False
    if date.year == MIN_YEAR and date.month == 1 and date.day < 14:
        return False
    if date.year == MAX_YEAR:
        if date.month == 12:
            return False
        if date.month == 11 and date.day > 14:
            return False

    return True
