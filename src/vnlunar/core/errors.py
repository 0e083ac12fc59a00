class VnLunarError(Exception):
    """Base error."""

class InvalidDateError(VnLunarError, ValueError):
    """Raised when a solar or lunar date is malformed or outside the supported range."""

class InvalidStateError(VnLunarError, RuntimeError):
    """Raised when decoded month data is empty or lacks its Julian day anchor."""

class OutOfRangeError(VnLunarError, ValueError):
    """Raised when a Julian day or year falls outside the available reference data."""
