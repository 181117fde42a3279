"""
Meridian

Deterministic solar ephemeris after the NOAA Solar Calculator: Julian
date conversion, solar orbital elements, topocentric azimuth and
refraction-corrected zenith, equation of time, solar noon, and
sunrise/sunset with explicit polar day/night results.
"""

from meridian.domain.julian_date import (
    julian_day,
    local_minutes_of_day,
    julian_century,
    jd_from_julian_century,
    calendar_date_from_jd,
    day_of_year_from_jd,
)
from meridian.domain.solar_elements import (
    SolarElements,
    solar_elements,
    equation_of_time,
    declination,
    right_ascension,
)
from meridian.domain.observer import (
    InvalidInputError,
    Observer,
    CalendarInstant,
    observer_from_datetime,
)
from meridian.domain.topocentric import (
    SolarPosition,
    solar_position,
    refraction_correction,
)
from meridian.domain.day_events import (
    PolarCondition,
    SolarEvent,
    NoEvent,
    RiseSet,
    DayEvents,
    solar_noon,
    hour_angle_sunrise,
    sunrise_sunset,
)
from meridian.domain.ephemeris import (
    Sunlight,
    compute_solar_position,
    compute_day_events,
    compute_sunlight,
)
from meridian.domain.almanac import (
    AlmanacEntry,
    compute_almanac,
)

__all__ = [
    "julian_day",
    "local_minutes_of_day",
    "julian_century",
    "jd_from_julian_century",
    "calendar_date_from_jd",
    "day_of_year_from_jd",
    "SolarElements",
    "solar_elements",
    "equation_of_time",
    "declination",
    "right_ascension",
    "InvalidInputError",
    "Observer",
    "CalendarInstant",
    "observer_from_datetime",
    "SolarPosition",
    "solar_position",
    "refraction_correction",
    "PolarCondition",
    "SolarEvent",
    "NoEvent",
    "RiseSet",
    "DayEvents",
    "solar_noon",
    "hour_angle_sunrise",
    "sunrise_sunset",
    "Sunlight",
    "compute_solar_position",
    "compute_day_events",
    "compute_sunlight",
    "AlmanacEntry",
    "compute_almanac",
]
