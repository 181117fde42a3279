# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar ephemeris calculator.

Public entry points: validate the observer and the local instant, reduce
the wall clock reading to standard time and Julian centuries, and
dispatch to the position and day-event solvers. Every call is
independent and returns a new immutable record.

"""
from dataclasses import dataclass

from meridian.domain.day_events import DayEvents, day_events
from meridian.domain.julian_date import (
    julian_century,
    julian_day,
    julian_day_of_local_time,
)
from meridian.domain.observer import (
    CalendarInstant,
    Observer,
    validate_instant,
    validate_observer,
)
from meridian.domain.topocentric import SolarPosition, solar_position

_DST_SHIFT_MIN = 60.0


@dataclass(frozen=True)
class Sunlight:
    """Sun position and day events for one observer and instant."""
    observer: Observer
    instant: CalendarInstant
    position: SolarPosition
    events: DayEvents


def _standard_minutes(observer: Observer, instant: CalendarInstant) -> float:
    """Local standard-time minutes since midnight of the instant's date."""
    minutes = instant.local_minutes
    if observer.daylight_saving:
        minutes -= _DST_SHIFT_MIN
    return minutes


def compute_solar_position(observer: Observer, instant: CalendarInstant) -> SolarPosition:
    """
    Sun position seen by an observer at a local clock instant.

    Args:
        observer: Location, standard UTC offset and DST flag.
        instant: Local wall clock date and time.

    Returns:
        SolarPosition (equation of time, declination, azimuth, corrected
        zenith and supporting angles).

    Raises:
        InvalidInputError: Observer off the globe or impossible instant.
    """
    validate_observer(observer)
    validate_instant(instant)

    minutes = _standard_minutes(observer, instant)
    jd = julian_day_of_local_time(
        instant.year, instant.month, instant.day, minutes, observer.utc_offset_hours,
    )
    return solar_position(
        julian_century(jd),
        minutes,
        observer.latitude_deg,
        observer.longitude_deg,
        observer.utc_offset_hours,
    )


def compute_day_events(observer: Observer, instant: CalendarInstant) -> DayEvents:
    """
    Solar noon, sunrise and sunset on the local date of an instant.

    Only the date of the instant is used.

    Raises:
        InvalidInputError: Observer off the globe or impossible instant.
    """
    validate_observer(observer)
    validate_instant(instant)

    jd = julian_day(instant.year, instant.month, instant.day)
    return day_events(
        jd,
        observer.latitude_deg,
        observer.longitude_deg,
        observer.utc_offset_hours,
        observer.daylight_saving,
    )


def compute_sunlight(observer: Observer, instant: CalendarInstant) -> Sunlight:
    """Position and day events together."""
    return Sunlight(
        observer=observer,
        instant=instant,
        position=compute_solar_position(observer, instant),
        events=compute_day_events(observer, instant),
    )
