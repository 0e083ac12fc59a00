# reference/solar.py

from __future__ import annotations

import math

J2000 = 2451545.0
TWO_PI = 2.0 * math.pi
DR = math.pi / 180.0  # degree to radian


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / 36525.0


def sun_longitude(jd: float, *, apparent: bool = True) -> float:
    """
    Solar ecliptic longitude in radians, wrapped to [0, 2*pi).

    Truncated Meeus series ("Astronomical Algorithms", ch. 25). With
    ``apparent=False`` the nutation/aberration correction is skipped and the
    true longitude is returned; the reference year tables were built that way.
    """
    T = T_centuries(jd)
    T2 = T * T

    M = 357.5291 + 35999.0503 * T - 0.0001559 * T2 - 0.00000048 * T * T2  # mean anomaly
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2  # mean longitude
    DL = (
        (1.9146 - 0.004817 * T - 0.000014 * T2) * math.sin(DR * M)
        + (0.019993 - 0.000101 * T) * math.sin(DR * 2 * M)
        + 0.00029 * math.sin(DR * 3 * M)
    )

    lam = L0 + DL  # true longitude
    if apparent:
        omega = 125.04 - 1934.136 * T
        lam = lam - 0.00569 - 0.00478 * math.sin(omega * DR)

    lam = lam * DR
    lam = lam - TWO_PI * math.floor(lam / TWO_PI)
    # float rounding can land a tiny negative angle exactly on 2*pi
    if lam >= TWO_PI:
        lam = 0.0
    return lam


def solar_term_index(jdn: int, time_zone: float) -> int:
    """
    Solar term segment (0..23) at local midnight starting day ``jdn``.

    0 from the March equinox on, then one step per 15 deg of apparent longitude.
    """
    return math.floor(sun_longitude(jdn - 0.5 - time_zone / 24.0) / math.pi * 12)


def major_term_index(jdn: int, time_zone: float) -> int:
    """Major-term segment (0..11) at local midnight, from the true longitude."""
    return math.floor(sun_longitude(jdn - 0.5 - time_zone / 24.0, apparent=False) / math.pi * 6)
