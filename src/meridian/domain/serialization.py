# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Report serialization.

Pure formatting functions turning ephemeris results into clock strings
and JSON-compatible dicts. No file I/O.
"""
import math
from dataclasses import asdict

from meridian.domain.day_events import NoEvent, RiseSet, SolarEvent
from meridian.domain.ephemeris import Sunlight
from meridian.domain.julian_date import calendar_date_from_jd

_SECONDS_PER_DAY = 86400


def format_clock_time(minutes: float) -> str:
    """
    Format minutes since midnight as HH:MM:SS.

    Seconds are rounded to the nearest whole second; a value that rounds
    up to midnight wraps to 00:00:00.
    """
    total = math.floor(minutes * 60.0 + 0.5) % _SECONDS_PER_DAY
    hours, rem = divmod(total, 3600)
    mins, secs = divmod(rem, 60)
    return f"{hours:02d}:{mins:02d}:{secs:02d}"


def format_jd_date(jd: float) -> str:
    """ISO date (YYYY-MM-DD) of the calendar day containing `jd`."""
    year, month, day = calendar_date_from_jd(jd)
    return f"{year:04d}-{month:02d}-{math.floor(day):02d}"


def format_rise_set(event: RiseSet) -> str:
    """Human-readable sunrise/sunset.

    "06:12:43" for an event, or the polar condition followed by the
    date and time of the nearest event when one was found.
    """
    if isinstance(event, SolarEvent):
        return format_clock_time(event.local_minutes)

    label = event.condition.value.replace("_", " ")
    if event.nearest is None:
        return label
    nearest = event.nearest
    return (f"{label} (nearest {format_jd_date(nearest.julian_day)} "
            f"{format_clock_time(nearest.local_minutes)})")


def rise_set_to_dict(event: RiseSet) -> dict:
    """JSON-compatible dict for a SolarEvent or NoEvent."""
    if isinstance(event, NoEvent):
        nearest = None
        if event.nearest is not None:
            nearest = rise_set_to_dict(event.nearest)
        return {
            "occurs": False,
            "condition": event.condition.value,
            "nearest": nearest,
        }
    return {
        "occurs": True,
        "local_minutes": event.local_minutes,
        "local_time": format_clock_time(event.local_minutes),
        "date": format_jd_date(event.julian_day),
        "julian_day": event.julian_day,
    }


def sunlight_to_dict(sunlight: Sunlight) -> dict:
    """JSON-compatible report of a Sunlight result."""
    position = asdict(sunlight.position)
    position["elevation_deg"] = sunlight.position.elevation_deg

    events = sunlight.events
    return {
        "observer": asdict(sunlight.observer),
        "instant": asdict(sunlight.instant),
        "position": position,
        "events": {
            "solar_noon_min": events.solar_noon_min,
            "solar_noon": format_clock_time(events.solar_noon_min),
            "sunrise": rise_set_to_dict(events.sunrise),
            "sunset": rise_set_to_dict(events.sunset),
            "sunrise_hour_angle_deg": events.sunrise_hour_angle_deg,
            "sun_always_up": events.sun_always_up,
            "day_length_min": events.day_length_min,
        },
    }
