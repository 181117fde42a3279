# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric solar azimuth and zenith.

Converts the geocentric solar elements to the horizon frame of an
observer: true solar time, hour angle, zenith angle from the spherical
triangle pole-zenith-sun, azimuth, and the empirical refraction
correction of the NOAA calculator.

"""
from dataclasses import dataclass

import numpy as np

from meridian.domain.julian_date import MINUTES_PER_DAY
from meridian.domain.solar_elements import solar_elements

# Below this |cos(lat) * sin(zenith)| the azimuth is undefined (pole or sun at zenith)
AZIMUTH_POLE_EPS = 0.001

# Refraction model breakpoints (apparent elevation, degrees)
_REFRACTION_NONE_ABOVE_DEG = 85.0
_REFRACTION_TAN_ABOVE_DEG = 5.0
_REFRACTION_POLY_ABOVE_DEG = -0.575


@dataclass(frozen=True)
class SolarPosition:
    """Topocentric sun position for one observer and instant."""
    equation_of_time_min: float
    declination_deg: float
    azimuth_deg: float  # [0, 360), eastward from north
    zenith_deg: float  # refraction corrected
    right_ascension_deg: float
    hour_angle_deg: float  # (-180, 180], negative before solar noon
    azimuth_south_deg: float  # (-180, 180], westward from south
    geometric_zenith_deg: float  # without refraction
    refraction_deg: float
    radius_vector_au: float

    @property
    def elevation_deg(self) -> float:
        """Apparent elevation above the horizon."""
        return 90.0 - self.zenith_deg


def _clamp_unit(x: float) -> float:
    return float(np.clip(x, -1.0, 1.0))


def true_solar_time(
    local_minutes: float,
    equation_of_time_min: float,
    longitude_deg: float,
    utc_offset_hours: float,
) -> float:
    """True (apparent) solar time in minutes, in [0, 1440)."""
    solar_time_fix = equation_of_time_min + 4.0 * longitude_deg - 60.0 * utc_offset_hours
    return (local_minutes + solar_time_fix) % MINUTES_PER_DAY


def hour_angle(true_solar_time_min: float) -> float:
    """Solar hour angle in degrees, in (-180, 180]."""
    ha = true_solar_time_min / 4.0 - 180.0
    if ha <= -180.0:
        ha += 360.0
    return ha


def zenith_angle(latitude_deg: float, declination_deg: float, hour_angle_deg: float) -> float:
    """Geometric zenith angle in degrees, in [0, 180]."""
    lat_rad = float(np.radians(latitude_deg))
    dec_rad = float(np.radians(declination_deg))
    ha_rad = float(np.radians(hour_angle_deg))
    csz = (float(np.sin(lat_rad)) * float(np.sin(dec_rad))
           + float(np.cos(lat_rad)) * float(np.cos(dec_rad)) * float(np.cos(ha_rad)))
    return float(np.degrees(np.arccos(_clamp_unit(csz))))


def azimuth(
    latitude_deg: float,
    declination_deg: float,
    hour_angle_deg: float,
    zenith_deg: float,
) -> float:
    """Azimuth in degrees eastward from north, in [0, 360).

    At the poles, or with the sun in the zenith, the azimuth is not
    defined; 180 is returned in the northern hemisphere and 0 otherwise.
    """
    lat_rad = float(np.radians(latitude_deg))
    zen_rad = float(np.radians(zenith_deg))
    denom = float(np.cos(lat_rad)) * float(np.sin(zen_rad))

    if abs(denom) > AZIMUTH_POLE_EPS:
        az_cos = ((float(np.sin(lat_rad)) * float(np.cos(zen_rad))
                   - float(np.sin(np.radians(declination_deg)))) / denom)
        az = 180.0 - float(np.degrees(np.arccos(_clamp_unit(az_cos))))
        if hour_angle_deg > 0.0:
            az = -az
    else:
        az = 180.0 if latitude_deg > 0.0 else 0.0

    if az < 0.0:
        az += 360.0
    # tiny negative azimuths round up to exactly 360 above
    if az >= 360.0:
        az -= 360.0
    return az


def azimuth_north_to_south(azimuth_deg: float) -> float:
    """Convert azimuth eastward from north to westward from south, (-180, 180]."""
    az = azimuth_deg - 180.0
    if az <= -180.0:
        az += 360.0
    return az


def refraction_correction(elevation_deg: float) -> float:
    """Atmospheric refraction in degrees for a geometric elevation.

    Piecewise NOAA model: none above 85 deg, a rational function of
    tan(elevation) above 5 deg, a quartic polynomial down to -0.575 deg,
    and -20.774/tan(elevation) arcseconds below the horizon.
    """
    if elevation_deg > _REFRACTION_NONE_ABOVE_DEG:
        return 0.0

    te = float(np.tan(np.radians(elevation_deg)))
    if elevation_deg > _REFRACTION_TAN_ABOVE_DEG:
        arcsec = 58.1 / te - 0.07 / (te * te * te) + 0.000086 / (te * te * te * te * te)
    elif elevation_deg > _REFRACTION_POLY_ABOVE_DEG:
        e = elevation_deg
        arcsec = 1735.0 + e * (-518.2 + e * (103.4 + e * (-12.79 + e * 0.711)))
    else:
        arcsec = -20.774 / te
    return arcsec / 3600.0


def solar_position(
    t: float,
    local_minutes: float,
    latitude_deg: float,
    longitude_deg: float,
    utc_offset_hours: float,
) -> SolarPosition:
    """
    Topocentric sun position.

    Args:
        t: Julian centuries since J2000.0 of the instant.
        local_minutes: Local standard-time minutes since midnight of
            the same instant.
        latitude_deg: Observer latitude, north positive.
        longitude_deg: Observer longitude, east positive.
        utc_offset_hours: Standard-time offset from UTC, east positive.

    Returns:
        SolarPosition with azimuth in [0, 360) and zenith in [0, 180].
    """
    elements = solar_elements(t)
    eq_time = elements.equation_of_time_min
    dec = elements.declination_deg

    tst = true_solar_time(local_minutes, eq_time, longitude_deg, utc_offset_hours)
    ha = hour_angle(tst)

    zenith = zenith_angle(latitude_deg, dec, ha)
    az = azimuth(latitude_deg, dec, ha, zenith)

    refraction = refraction_correction(90.0 - zenith)
    # guard only: the refraction model never moves a zenith in [0, 180] out of range
    corrected = min(max(zenith - refraction, 0.0), 180.0)

    return SolarPosition(
        equation_of_time_min=eq_time,
        declination_deg=dec,
        azimuth_deg=az,
        zenith_deg=corrected,
        right_ascension_deg=elements.right_ascension_deg,
        hour_angle_deg=ha,
        azimuth_south_deg=azimuth_north_to_south(az),
        geometric_zenith_deg=zenith,
        refraction_deg=refraction,
        radius_vector_au=elements.radius_vector_au,
    )
