# tests/test_solar.py

import math

import pytest

from vnlunar.core.time import jdn_from_ymd
from vnlunar.reference import solar

TWO_PI = 2.0 * math.pi

def _angle_diff(a: float, b: float) -> float:
    return abs((a - b + math.pi) % TWO_PI - math.pi)

def test_j2000_apparent_longitude():
    """Meeus series at J2000.0: true longitude ~280.382 deg, apparent ~280.373 deg."""
    lam = solar.sun_longitude(2451545.0)
    assert math.degrees(lam) == pytest.approx(280.3725, abs=0.01)

    true_lam = solar.sun_longitude(2451545.0, apparent=False)
    assert math.degrees(true_lam) == pytest.approx(280.3821, abs=0.01)

@pytest.mark.parametrize("jd", [-1.0e6, 0.0, 1721425.5, 2159000.25, 2451545.0, 2460000.75, 2524000.0])
def test_longitude_is_wrapped(jd):
    lam = solar.sun_longitude(jd)
    assert 0.0 <= lam < TWO_PI

@pytest.mark.parametrize("k", [1, 2, 5, 10, -3, -10])
def test_tropical_year_periodicity(k):
    jd = 2451545.0
    a = solar.sun_longitude(jd)
    b = solar.sun_longitude(jd + 365.2422 * k)
    assert _angle_diff(a, b) < 1e-3

def test_solar_term_index_around_march_equinox_2024():
    # Equinox 2024-03-20 03:06 UT, i.e. 10:06 in UTC+7
    assert solar.solar_term_index(jdn_from_ymd(20, 3, 2024), 7.0) == 23
    assert solar.solar_term_index(jdn_from_ymd(21, 3, 2024), 7.0) == 0

def test_solar_term_index_range():
    start = jdn_from_ymd(1, 1, 2023)
    seen = {solar.solar_term_index(start + i, 7.0) for i in range(366)}
    assert seen == set(range(24))

def test_major_term_index_at_december_solstice():
    # Solstice 2023-12-22 03:27 UT: major term 9 (270 deg) starts that day in UTC+7
    assert solar.major_term_index(jdn_from_ymd(22, 12, 2023), 7.0) == 8
    assert solar.major_term_index(jdn_from_ymd(23, 12, 2023), 7.0) == 9
