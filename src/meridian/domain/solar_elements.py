# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar orbital elements as series in Julian centuries.

Geocentric position of the Sun following the NOAA Solar Calculator
(Meeus, Astronomical Algorithms, Ch. 25 low-precision theory). Every
function takes T, Julian centuries since J2000.0, and returns degrees
unless noted otherwise. Coefficients are those of the published NOAA
calculator and must not be rounded.

"""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SolarElements:
    """Geocentric solar elements at a single instant."""
    julian_century: float
    geom_mean_longitude_deg: float
    geom_mean_anomaly_deg: float
    eccentricity: float
    equation_of_center_deg: float
    true_longitude_deg: float
    true_anomaly_deg: float
    radius_vector_au: float
    apparent_longitude_deg: float
    mean_obliquity_deg: float
    obliquity_corrected_deg: float
    right_ascension_deg: float
    declination_deg: float
    equation_of_time_min: float


def _sin_deg(angle_deg: float) -> float:
    return float(np.sin(np.radians(angle_deg)))


def _cos_deg(angle_deg: float) -> float:
    return float(np.cos(np.radians(angle_deg)))


def _omega(t: float) -> float:
    """Longitude of the Moon's ascending node, used for nutation."""
    return 125.04 - 1934.136 * t


def geom_mean_longitude(t: float) -> float:
    """Geometric mean longitude of the Sun, L0, in [0, 360]."""
    return (280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0


def geom_mean_anomaly(t: float) -> float:
    """Geometric mean anomaly of the Sun, M (not reduced)."""
    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def eccentricity(t: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float) -> float:
    """Equation of center C, the true minus mean anomaly."""
    m_rad = float(np.radians(geom_mean_anomaly(t)))
    sin_m = float(np.sin(m_rad))
    sin_2m = float(np.sin(m_rad + m_rad))
    sin_3m = float(np.sin(m_rad + m_rad + m_rad))
    return (sin_m * (1.914602 - t * (0.004817 + 0.000014 * t))
            + sin_2m * (0.019993 - 0.000101 * t)
            + sin_3m * 0.000289)


def true_longitude(t: float) -> float:
    return geom_mean_longitude(t) + equation_of_center(t)


def true_anomaly(t: float) -> float:
    return geom_mean_anomaly(t) + equation_of_center(t)


def radius_vector(t: float) -> float:
    """Earth-Sun distance in astronomical units."""
    v = true_anomaly(t)
    e = eccentricity(t)
    return (1.000001018 * (1.0 - e * e)) / (1.0 + e * _cos_deg(v))


def apparent_longitude(t: float) -> float:
    """True longitude corrected for nutation and aberration."""
    return true_longitude(t) - 0.00569 - 0.00478 * _sin_deg(_omega(t))


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic."""
    seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def obliquity_correction(t: float) -> float:
    """Obliquity of the ecliptic corrected for nutation."""
    return mean_obliquity(t) + 0.00256 * _cos_deg(_omega(t))


def right_ascension(t: float) -> float:
    """Apparent right ascension in (-180, 180].

    Two-argument arctangent keeps the quadrant of the apparent longitude.
    """
    eps = obliquity_correction(t)
    lam = apparent_longitude(t)
    num = _cos_deg(eps) * _sin_deg(lam)
    den = _cos_deg(lam)
    return float(np.degrees(np.arctan2(num, den)))


def declination(t: float) -> float:
    """Apparent declination in [-90, 90]."""
    eps = obliquity_correction(t)
    lam = apparent_longitude(t)
    sin_dec = float(np.clip(_sin_deg(eps) * _sin_deg(lam), -1.0, 1.0))
    return float(np.degrees(np.arcsin(sin_dec)))


def equation_of_time(t: float) -> float:
    """Equation of time in minutes (apparent minus mean solar time).

    Positive when the sundial runs ahead of the clock, e.g. about
    +16 minutes in early November.
    """
    eps = obliquity_correction(t)
    l0_rad = float(np.radians(geom_mean_longitude(t)))
    e = eccentricity(t)
    m_rad = float(np.radians(geom_mean_anomaly(t)))

    y = float(np.tan(np.radians(eps) / 2.0))
    y *= y

    sin_2l0 = float(np.sin(2.0 * l0_rad))
    sin_m = float(np.sin(m_rad))
    cos_2l0 = float(np.cos(2.0 * l0_rad))
    sin_4l0 = float(np.sin(4.0 * l0_rad))
    sin_2m = float(np.sin(2.0 * m_rad))

    e_time = (y * sin_2l0
              - 2.0 * e * sin_m
              + 4.0 * e * y * sin_m * cos_2l0
              - 0.5 * y * y * sin_4l0
              - 1.25 * e * e * sin_2m)
    return float(np.degrees(e_time)) * 4.0


def solar_elements(t: float) -> SolarElements:
    """All geocentric solar elements at Julian century T."""
    return SolarElements(
        julian_century=t,
        geom_mean_longitude_deg=geom_mean_longitude(t),
        geom_mean_anomaly_deg=geom_mean_anomaly(t),
        eccentricity=eccentricity(t),
        equation_of_center_deg=equation_of_center(t),
        true_longitude_deg=true_longitude(t),
        true_anomaly_deg=true_anomaly(t),
        radius_vector_au=radius_vector(t),
        apparent_longitude_deg=apparent_longitude(t),
        mean_obliquity_deg=mean_obliquity(t),
        obliquity_corrected_deg=obliquity_correction(t),
        right_ascension_deg=right_ascension(t),
        declination_deg=declination(t),
        equation_of_time_min=equation_of_time(t),
    )
