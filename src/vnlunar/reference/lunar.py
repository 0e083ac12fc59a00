# reference/lunar.py

from __future__ import annotations

import math

from .solar import DR

# JD of the new moon k=0 (1900-01-01 13:52 UT) and the mean synodic month.
NEW_MOON_EPOCH = 2415021.076998695
SYNODIC_MONTH = 29.530588853


def new_moon(k: int) -> float:
    """
    Julian date (UT) of the k-th new moon after 1900-01-01.

    Meeus, "Astronomical Algorithms" 1998, with a polynomial Delta T.
    """
    T = k / 1236.85  # Julian centuries from 1900-01-01 12:00
    T2 = T * T
    T3 = T2 * T

    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * T2 - 0.000000155 * T3
    jd1 = jd1 + 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * DR)  # mean new moon

    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3  # sun's mean anomaly
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3  # moon's mean anomaly
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3  # moon's argument of latitude

    C1 = (0.1734 - 0.000393 * T) * math.sin(M * DR) + 0.0021 * math.sin(2 * DR * M)
    C1 = C1 - 0.4068 * math.sin(Mpr * DR) + 0.0161 * math.sin(DR * 2 * Mpr)
    C1 = C1 - 0.0004 * math.sin(DR * 3 * Mpr)
    C1 = C1 + 0.0104 * math.sin(DR * 2 * F) - 0.0051 * math.sin(DR * (M + Mpr))
    C1 = C1 - 0.0074 * math.sin(DR * (M - Mpr)) + 0.0004 * math.sin(DR * (2 * F + M))
    C1 = C1 - 0.0004 * math.sin(DR * (2 * F - M)) - 0.0006 * math.sin(DR * (2 * F + Mpr))
    C1 = C1 + 0.0010 * math.sin(DR * (2 * F - Mpr)) + 0.0005 * math.sin(DR * (2 * Mpr + M))

    if T < -11:
        deltat = 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3
    else:
        deltat = -0.000278 + 0.000265 * T + 0.000262 * T2

    return jd1 + C1 - deltat


def new_moon_day(k: int, time_zone: float) -> int:
    """Local civil JDN of the day containing the k-th new moon."""
    return math.floor(new_moon(k) + 0.5 + time_zone / 24.0)

