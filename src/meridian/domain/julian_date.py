# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Calendar and Julian Date conversions.

Proleptic Gregorian calendar to Julian Day Number and back, local
minutes of day, and Julian centuries since J2000.0 (Meeus, Astronomical
Algorithms, Ch. 7).

Inputs are not range checked here: an impossible date such as month 14
yields a mathematically defined but physically meaningless JD. Validation
belongs to the API boundary (see meridian.domain.observer).
"""
import math

J2000_JD: float = 2451545.0
"""Julian Date of J2000.0 (2000-01-01 12:00 TT)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0

MINUTES_PER_DAY: float = 1440.0


def julian_day(year: int, month: int, day: float) -> float:
    """Julian Day at 0h UT of a Gregorian calendar date.

    January and February are counted as months 13 and 14 of the
    previous year.

    Args:
        year: Calendar year (astronomical numbering, 0 = 1 BC).
        month: Month 1-12.
        day: Day of month, may carry a fractional part.

    Returns:
        Julian Day (ends in .5 for integral days).
    """
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return (math.floor(365.25 * (year + 4716))
            + math.floor(30.6001 * (month + 1))
            + day + b - 1524.5)


def local_minutes_of_day(hour: int, minute: int, second: float) -> float:
    """Minutes elapsed since local midnight."""
    return hour * 60.0 + minute + second / 60.0


def julian_century(jd: float) -> float:
    """Julian centuries since J2000.0 (T = 0 at 2000-01-01 12:00)."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def jd_from_julian_century(t: float) -> float:
    """Inverse of julian_century."""
    return t * DAYS_PER_JULIAN_CENTURY + J2000_JD


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a Gregorian month."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def calendar_date_from_jd(jd: float) -> tuple[int, int, float]:
    """Calendar date of a Julian Day.

    Proleptic Gregorian throughout, the inverse of julian_day.

    Returns:
        (year, month, day) where day carries the fraction of the day
        elapsed since 0h.
    """
    z = math.floor(jd + 0.5)
    f = (jd + 0.5) - z
    alpha = math.floor((z - 1867216.25) / 36524.25)
    a = z + 1 + alpha - math.floor(alpha / 4)
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return int(year), int(month), day


def day_of_year_from_jd(jd: float) -> int:
    """Ordinal day of the year (1 = January 1st) for a Julian Day."""
    year, month, day = calendar_date_from_jd(jd)
    k = 1 if is_leap_year(year) else 2
    doy = (math.floor(275 * month / 9)
           - k * math.floor((month + 9) / 12)
           + math.floor(day) - 30)
    return int(doy)


def julian_day_of_local_time(
    year: int,
    month: int,
    day: int,
    local_minutes: float,
    utc_offset_hours: float,
) -> float:
    """Continuous Julian Date of a local clock reading.

    Args:
        year, month, day: Local calendar date.
        local_minutes: Minutes since local midnight.
        utc_offset_hours: Local offset from UTC (east positive).

    Returns:
        Julian Date in UT.
    """
    return (julian_day(year, month, day)
            + local_minutes / MINUTES_PER_DAY
            - utc_offset_hours / 24.0)
