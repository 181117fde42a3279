# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Day-by-day solar almanac for a fixed observer.

One entry per local date: sun position at local clock noon plus the
day's solar noon, sunrise and sunset.
"""
from dataclasses import dataclass
from datetime import date, timedelta

from meridian.domain.day_events import DayEvents
from meridian.domain.ephemeris import compute_day_events, compute_solar_position
from meridian.domain.observer import CalendarInstant, Observer


@dataclass(frozen=True)
class AlmanacEntry:
    """Solar data for a single local date."""
    day: date
    noon_zenith_deg: float
    noon_azimuth_deg: float
    equation_of_time_min: float
    declination_deg: float
    events: DayEvents


def compute_almanac(
    observer: Observer,
    start: date,
    days: int,
) -> list[AlmanacEntry]:
    """
    Solar almanac for consecutive local dates.

    Args:
        observer: Location and UTC offset; the DST flag applies to every day.
        start: First local date.
        days: Number of dates.

    Returns:
        List of AlmanacEntry, one per date starting at `start`.

    Raises:
        ValueError: If days is zero or negative.
        InvalidInputError: If the observer is off the globe.
    """
    if days <= 0:
        raise ValueError(f"days must be positive, got {days}")

    entries: list[AlmanacEntry] = []
    for offset in range(days):
        current = start + timedelta(days=offset)
        instant = CalendarInstant(current.year, current.month, current.day, 12, 0, 0.0)
        position = compute_solar_position(observer, instant)
        events = compute_day_events(observer, instant)
        entries.append(AlmanacEntry(
            day=current,
            noon_zenith_deg=position.zenith_deg,
            noon_azimuth_deg=position.azimuth_deg,
            equation_of_time_min=position.equation_of_time_min,
            declination_deg=position.declination_deg,
            events=events,
        ))

    return entries
