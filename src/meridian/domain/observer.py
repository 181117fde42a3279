# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Observer and local calendar instant value objects.

The series and solver modules never validate their arguments; the
checks here run once at the API boundary so that malformed input fails
fast instead of producing a silently wrong sun position.

"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from meridian.domain.julian_date import days_in_month, local_minutes_of_day

MIN_UTC_OFFSET_HOURS = -14.0
MAX_UTC_OFFSET_HOURS = 13.0


class InvalidInputError(ValueError):
    """Observer or calendar instant outside its valid domain."""


@dataclass(frozen=True)
class Observer:
    """A geographic observer.

    The UTC offset is the standard-time offset; daylight saving is a
    separate flag that shifts the local clock by one hour.
    """
    latitude_deg: float
    longitude_deg: float  # east positive
    utc_offset_hours: float = 0.0  # east positive
    daylight_saving: bool = False


@dataclass(frozen=True)
class CalendarInstant:
    """Local civil (wall clock) date and time at the observer."""
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    @property
    def local_minutes(self) -> float:
        """Minutes since local midnight."""
        return local_minutes_of_day(self.hour, self.minute, self.second)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CalendarInstant":
        """Wall clock fields of a datetime; tzinfo and microseconds are ignored."""
        return cls(
            year=dt.year, month=dt.month, day=dt.day,
            hour=dt.hour, minute=dt.minute, second=float(dt.second),
        )


def observer_from_datetime(
    dt: datetime,
    latitude_deg: float,
    longitude_deg: float,
) -> Observer:
    """Observer whose UTC offset and DST flag come from an aware datetime.

    Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    total = dt.utcoffset() or timedelta(0)
    dst = dt.dst() or timedelta(0)
    standard = total - dst

    return Observer(
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
        utc_offset_hours=standard.total_seconds() / 3600.0,
        daylight_saving=dst != timedelta(0),
    )


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")


def validate_observer(observer: Observer) -> None:
    """Raise InvalidInputError unless the observer is on the globe.

    Latitude in [-90, 90], longitude in [-180, 180], UTC offset in
    [-14, 13] hours.
    """
    _require_finite("latitude_deg", observer.latitude_deg)
    _require_finite("longitude_deg", observer.longitude_deg)
    _require_finite("utc_offset_hours", observer.utc_offset_hours)

    if not -90.0 <= observer.latitude_deg <= 90.0:
        raise InvalidInputError(
            f"latitude_deg must be in [-90, 90], got {observer.latitude_deg}"
        )
    if not -180.0 <= observer.longitude_deg <= 180.0:
        raise InvalidInputError(
            f"longitude_deg must be in [-180, 180], got {observer.longitude_deg}"
        )
    if not MIN_UTC_OFFSET_HOURS <= observer.utc_offset_hours <= MAX_UTC_OFFSET_HOURS:
        raise InvalidInputError(
            f"utc_offset_hours must be in [{MIN_UTC_OFFSET_HOURS:g}, "
            f"{MAX_UTC_OFFSET_HOURS:g}], got {observer.utc_offset_hours}"
        )


def validate_instant(instant: CalendarInstant) -> None:
    """Raise InvalidInputError unless the instant is a real clock reading."""
    if not 1 <= instant.month <= 12:
        raise InvalidInputError(f"month must be in [1, 12], got {instant.month}")

    last_day = days_in_month(instant.year, instant.month)
    if not 1 <= instant.day <= last_day:
        raise InvalidInputError(
            f"day must be in [1, {last_day}] for {instant.year:04d}-{instant.month:02d}, "
            f"got {instant.day}"
        )
    if not 0 <= instant.hour <= 23:
        raise InvalidInputError(f"hour must be in [0, 23], got {instant.hour}")
    if not 0 <= instant.minute <= 59:
        raise InvalidInputError(f"minute must be in [0, 59], got {instant.minute}")

    _require_finite("second", instant.second)
    if not 0.0 <= instant.second < 60.0:
        raise InvalidInputError(f"second must be in [0, 60), got {instant.second}")
