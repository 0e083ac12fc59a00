# tests/test_time.py

import random
from datetime import date

import pytest

from vnlunar.core.errors import InvalidDateError
from vnlunar.core.time import jdn_from_ymd, to_jdn, ymd_from_jdn
from vnlunar.core.types import SolarDate

def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert jdn_from_ymd(1, 1, 2000) == 2451545
    assert to_jdn(date(1970, 1, 1)) == 2440588

def test_gregorian_reform_boundary():
    """Julian 1582-10-04 is followed directly by Gregorian 1582-10-15."""
    assert jdn_from_ymd(15, 10, 1582) == 2299161
    assert jdn_from_ymd(4, 10, 1582) == 2299160
    assert ymd_from_jdn(2299160) == (4, 10, 1582)
    assert ymd_from_jdn(2299161) == (15, 10, 1582)

def test_jdn_roundtrip_across_both_calendars():
    random.seed(42)
    # lunar 1200 .. 2200 plus some margin
    for _ in range(5000):
        jdn_in = random.randint(2159000, 2525000)
        day, month, year = ymd_from_jdn(jdn_in)
        assert jdn_from_ymd(day, month, year) == jdn_in

def test_julian_leap_rule_before_reform():
    # 1500 is a leap year in the Julian calendar only
    assert SolarDate.is_valid_date(29, 2, 1500)
    assert not SolarDate.is_valid_date(29, 2, 1900)
    assert SolarDate.is_valid_date(29, 2, 2000)
    assert jdn_from_ymd(1, 3, 1500) - jdn_from_ymd(28, 2, 1500) == 2

@pytest.mark.parametrize("day", [5, 10, 14])
def test_skipped_reform_days_are_invalid(day):
    with pytest.raises(InvalidDateError):
        SolarDate(day, 10, 1582)

def test_solar_date_conversions():
    d = SolarDate(22, 1, 2023)
    assert SolarDate.jdn(d) == SolarDate.jdn(date(2023, 1, 22)) == to_jdn(d)
    assert SolarDate.from_jd(SolarDate.jdn(d)) == d
    assert d.to_date() == date(2023, 1, 22)
    assert SolarDate.from_date(date(2023, 1, 22)) == d
    assert d.get() == {"day": 22, "month": 1, "year": 2023}
    assert str(d) == "2023-01-22"

def test_julian_solar_date_has_no_datetime():
    with pytest.raises(InvalidDateError):
        SolarDate(1, 1, 1500).to_date()

@pytest.mark.parametrize("dmy", [(0, 1, 2000), (32, 1, 2000), (31, 4, 2000), (1, 13, 2000), (30, 2, 2024)])
def test_invalid_solar_dates(dmy):
    with pytest.raises(InvalidDateError):
        SolarDate(*dmy)
