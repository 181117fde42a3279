# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar noon, sunrise and sunset.

Two-pass NOAA solver: a first estimate of the event time is used to
re-evaluate the equation of time and declination at the event itself.
When the sun does not cross the horizon (polar day or polar night) the
result is a NoEvent carrying the nearest day on which the event does
happen, found by a bounded day-by-day search.

"""
import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from meridian.domain.julian_date import (
    MINUTES_PER_DAY,
    day_of_year_from_jd,
    julian_century,
)
from meridian.domain.solar_elements import declination, equation_of_time

logger = logging.getLogger(__name__)

# Geometric zenith of the sun's upper limb at rise/set (refraction + semidiameter)
SUNRISE_ZENITH_DEG = 90.833

# Latitude and day-of-year window used to tell polar day from polar night.
# The windows approximate the equinoxes and are kept as published.
POLAR_LATITUDE_DEG = 66.4
_NORTH_POLAR_DAY_DOY = (79, 267)
_SOUTH_POLAR_DAY_DOY = (83, 263)

# Rise/set events are never more than half a year apart
MAX_SEARCH_DAYS = 182


class PolarCondition(Enum):
    POLAR_DAY = "polar_day"
    POLAR_NIGHT = "polar_night"


@dataclass(frozen=True)
class SolarEvent:
    """A sunrise or sunset in local time."""
    local_minutes: float  # [0, 1440)
    julian_day: float  # 0h JD of the local date the event falls on


@dataclass(frozen=True)
class NoEvent:
    """The sun does not rise (or set) on the requested day."""
    condition: PolarCondition
    nearest: SolarEvent | None = None  # None when the search limit is reached


RiseSet = SolarEvent | NoEvent


@dataclass(frozen=True)
class DayEvents:
    """Solar noon and rise/set for one local day."""
    solar_noon_min: float  # [0, 1440)
    sunrise: RiseSet
    sunset: RiseSet
    sunrise_hour_angle_deg: float | None = None
    sun_always_up: bool | None = None  # None when the sun rises and sets at noon declination

    @property
    def day_length_min(self) -> float | None:
        """Minutes between sunrise and sunset on the same local day.

        1440 when the sun stays above the horizon, 0 when it stays below,
        None when rise and set straddle different local dates. Without
        sun_always_up the polar condition label decides.
        """
        rise, set_ = self.sunrise, self.sunset
        if isinstance(rise, NoEvent) and isinstance(set_, NoEvent):
            if self.sun_always_up is not None:
                return MINUTES_PER_DAY if self.sun_always_up else 0.0
            if rise.condition is PolarCondition.POLAR_DAY:
                return MINUTES_PER_DAY
            return 0.0
        if isinstance(rise, SolarEvent) and isinstance(set_, SolarEvent):
            if rise.julian_day == set_.julian_day and set_.local_minutes >= rise.local_minutes:
                return set_.local_minutes - rise.local_minutes
        return None


def _normalize_minutes(minutes: float) -> float:
    while minutes < 0.0:
        minutes += MINUTES_PER_DAY
    while minutes >= MINUTES_PER_DAY:
        minutes -= MINUTES_PER_DAY
    return minutes


def solar_noon(
    jd: float,
    longitude_deg: float,
    utc_offset_hours: float,
    dst: bool = False,
) -> float:
    """Local clock time of solar noon in minutes, in [0, 1440).

    Args:
        jd: Julian Day at 0h of the local date.
        longitude_deg: Observer longitude, east positive.
        utc_offset_hours: Standard-time UTC offset, east positive.
        dst: Daylight saving in effect (adds one hour).
    """
    t_noon = julian_century(jd - longitude_deg / 360.0)
    eq_time = equation_of_time(t_noon)
    noon_offset = 720.0 - longitude_deg * 4.0 - eq_time

    t_refined = julian_century(jd + noon_offset / MINUTES_PER_DAY)
    eq_time = equation_of_time(t_refined)
    noon_local = 720.0 - longitude_deg * 4.0 - eq_time + utc_offset_hours * 60.0
    if dst:
        noon_local += 60.0
    return _normalize_minutes(noon_local)


def sunrise_hour_angle_argument(latitude_deg: float, declination_deg: float) -> float:
    """Cosine of the sunrise hour angle, unclamped.

    Below -1 the sun stays above the horizon all day, above 1 it stays
    below.
    """
    lat_rad = float(np.radians(latitude_deg))
    dec_rad = float(np.radians(declination_deg))
    ha_arg = (float(np.cos(np.radians(SUNRISE_ZENITH_DEG)))
              / (float(np.cos(lat_rad)) * float(np.cos(dec_rad)))
              - float(np.tan(lat_rad)) * float(np.tan(dec_rad)))
    return ha_arg


def hour_angle_sunrise(latitude_deg: float, declination_deg: float) -> float | None:
    """Hour angle of sunrise in radians (negate for sunset).

    Returns None when the sun stays above or below the horizon all day.
    """
    ha_arg = sunrise_hour_angle_argument(latitude_deg, declination_deg)
    if not -1.0 <= ha_arg <= 1.0:
        return None
    return float(np.arccos(ha_arg))


def sunrise_sunset_utc(
    is_rise: bool,
    jd: float,
    latitude_deg: float,
    longitude_deg: float,
) -> float | None:
    """UTC minutes after 0h of `jd` of sunrise or sunset, None if it does not occur."""
    t = julian_century(jd)
    eq_time = equation_of_time(t)
    solar_dec = declination(t)
    ha = hour_angle_sunrise(latitude_deg, solar_dec)
    if ha is None:
        return None
    if not is_rise:
        ha = -ha
    delta = longitude_deg + float(np.degrees(ha))
    return 720.0 - 4.0 * delta - eq_time


def _local_event(time_local: float, jd: float) -> SolarEvent:
    """Wrap local minutes into one day, moving the date across midnight."""
    while time_local < 0.0 or time_local >= MINUTES_PER_DAY:
        increment = 1 if time_local < 0.0 else -1
        time_local += increment * MINUTES_PER_DAY
        jd -= increment
    return SolarEvent(local_minutes=time_local, julian_day=jd)


def polar_condition(jd: float, latitude_deg: float) -> PolarCondition:
    """Whether a day without sunrise/sunset is polar day or polar night."""
    doy = day_of_year_from_jd(jd)
    north_lo, north_hi = _NORTH_POLAR_DAY_DOY
    south_lo, south_hi = _SOUTH_POLAR_DAY_DOY
    if ((latitude_deg > POLAR_LATITUDE_DEG and north_lo < doy < north_hi)
            or (latitude_deg < -POLAR_LATITUDE_DEG and (doy < south_lo or doy > south_hi))):
        return PolarCondition.POLAR_DAY
    return PolarCondition.POLAR_NIGHT


def next_prev_rise_set(
    search_forward: bool,
    is_rise: bool,
    jd: float,
    latitude_deg: float,
    longitude_deg: float,
    utc_offset_hours: float,
    dst: bool = False,
    max_days: int = MAX_SEARCH_DAYS,
) -> SolarEvent | None:
    """Nearest sunrise or sunset before or after `jd`.

    Steps one day at a time for at most `max_days` days.

    Returns:
        The event in local time, or None if none was found in range.
    """
    increment = 1.0 if search_forward else -1.0
    julianday = jd
    time_utc = sunrise_sunset_utc(is_rise, julianday, latitude_deg, longitude_deg)
    steps = 0
    while time_utc is None:
        if steps >= max_days:
            logger.warning(
                "No %s within %d days of JD %.1f at latitude %.4f",
                "sunrise" if is_rise else "sunset", max_days, jd, latitude_deg,
            )
            return None
        julianday += increment
        steps += 1
        time_utc = sunrise_sunset_utc(is_rise, julianday, latitude_deg, longitude_deg)

    time_local = time_utc + utc_offset_hours * 60.0 + (60.0 if dst else 0.0)
    return _local_event(time_local, julianday)


def sunrise_sunset(
    is_rise: bool,
    jd: float,
    latitude_deg: float,
    longitude_deg: float,
    utc_offset_hours: float,
    dst: bool = False,
) -> RiseSet:
    """
    Local sunrise or sunset for the day starting at `jd`.

    The first estimate of the UTC event time is refined by evaluating the
    sun again at that moment.

    Args:
        is_rise: True for sunrise, False for sunset.
        jd: Julian Day at 0h of the local date.
        latitude_deg: Observer latitude, north positive.
        longitude_deg: Observer longitude, east positive.
        utc_offset_hours: Standard-time UTC offset, east positive.
        dst: Daylight saving in effect.

    Returns:
        SolarEvent, or NoEvent in polar day/night. In polar day the
        nearest event is the previous sunrise or the next sunset; in
        polar night it is the next sunrise or the previous sunset.
    """
    time_utc = sunrise_sunset_utc(is_rise, jd, latitude_deg, longitude_deg)
    refined = None
    if time_utc is not None:
        refined = sunrise_sunset_utc(
            is_rise, jd + time_utc / MINUTES_PER_DAY, latitude_deg, longitude_deg,
        )

    if refined is not None:
        time_local = refined + utc_offset_hours * 60.0 + (60.0 if dst else 0.0)
        return _local_event(time_local, jd)

    condition = polar_condition(jd, latitude_deg)
    logger.debug(
        "No %s on JD %.1f at latitude %.4f: %s",
        "sunrise" if is_rise else "sunset", jd, latitude_deg, condition.value,
    )
    if condition is PolarCondition.POLAR_DAY:
        search_forward = not is_rise
    else:
        search_forward = is_rise
    nearest = next_prev_rise_set(
        search_forward, is_rise, jd, latitude_deg, longitude_deg, utc_offset_hours, dst,
    )
    return NoEvent(condition=condition, nearest=nearest)


def day_events(
    jd: float,
    latitude_deg: float,
    longitude_deg: float,
    utc_offset_hours: float,
    dst: bool = False,
) -> DayEvents:
    """Solar noon, sunrise and sunset for the local day starting at `jd`."""
    noon = solar_noon(jd, longitude_deg, utc_offset_hours, dst)
    sunrise = sunrise_sunset(True, jd, latitude_deg, longitude_deg, utc_offset_hours, dst)
    sunset = sunrise_sunset(False, jd, latitude_deg, longitude_deg, utc_offset_hours, dst)

    # Declination at local apparent noon, as seen from the observer's meridian
    noon_dec = declination(julian_century(jd + 0.5 - longitude_deg / 360.0))
    ha_arg = sunrise_hour_angle_argument(latitude_deg, noon_dec)
    ha_deg = None
    sun_always_up = None
    if -1.0 <= ha_arg <= 1.0:
        ha_deg = float(np.degrees(np.arccos(ha_arg)))
    else:
        sun_always_up = ha_arg < -1.0

    return DayEvents(
        solar_noon_min=noon,
        sunrise=sunrise,
        sunset=sunset,
        sunrise_hour_angle_deg=ha_deg,
        sun_always_up=sun_always_up,
    )
