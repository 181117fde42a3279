# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the public ephemeris entry points.

Reference observer: Golden, Colorado (NREL SPA test case),
2003-10-17 12:30:30 MST.
"""
import ast
import math

import pytest

from meridian import (
    CalendarInstant,
    DayEvents,
    InvalidInputError,
    NoEvent,
    Observer,
    PolarCondition,
    SolarEvent,
    SolarPosition,
    Sunlight,
    compute_day_events,
    compute_solar_position,
    compute_sunlight,
)

_GOLDEN = Observer(latitude_deg=39.742476, longitude_deg=-105.1786, utc_offset_hours=-7.0)
_INSTANT = CalendarInstant(2003, 10, 17, 12, 30, 30)


# ── Solar position ───────────────────────────────────────────────────

class TestComputeSolarPosition:

    def test_returns_solar_position(self):
        assert isinstance(compute_solar_position(_GOLDEN, _INSTANT), SolarPosition)

    def test_equation_of_time(self):
        """+14.6466 min, the published magnitude 14.64 with the NOAA sign.

        Positive means the sundial is ahead of the clock; a quoted value of
        -14.64 for this instant carries the opposite sign convention.
        """
        pos = compute_solar_position(_GOLDEN, _INSTANT)
        assert pos.equation_of_time_min == pytest.approx(14.6466, abs=0.01)

    def test_declination(self):
        """-9.3158 deg from the NOAA series, not the -9.93 sometimes quoted for this case."""
        pos = compute_solar_position(_GOLDEN, _INSTANT)
        assert pos.declination_deg == pytest.approx(-9.3158, abs=1e-3)

    def test_zenith(self):
        pos = compute_solar_position(_GOLDEN, _INSTANT)
        assert pos.zenith_deg == pytest.approx(50.11, abs=0.01)

    def test_azimuth(self):
        pos = compute_solar_position(_GOLDEN, _INSTANT)
        assert pos.azimuth_deg == pytest.approx(194.34, abs=0.01)

    def test_dst_clock_reading_is_shifted_to_standard_time(self):
        """13:30:30 MDT is the same instant as 12:30:30 MST."""
        dst_observer = Observer(39.742476, -105.1786, -7.0, daylight_saving=True)
        dst_instant = CalendarInstant(2003, 10, 17, 13, 30, 30)
        assert (compute_solar_position(dst_observer, dst_instant)
                == compute_solar_position(_GOLDEN, _INSTANT))

    def test_deterministic(self):
        a = compute_solar_position(_GOLDEN, _INSTANT)
        b = compute_solar_position(_GOLDEN, _INSTANT)
        assert a == b
        assert a.azimuth_deg.hex() == b.azimuth_deg.hex()


class TestPoles:

    @pytest.mark.parametrize("lat, expected_az", [(90.0, 180.0), (-90.0, 0.0)])
    def test_pole_azimuth_branch(self, lat, expected_az):
        obs = Observer(latitude_deg=lat, longitude_deg=0.0)
        for hour in (0, 6, 12, 18):
            pos = compute_solar_position(obs, CalendarInstant(2003, 6, 21, hour))
            assert pos.azimuth_deg == expected_az
            assert not math.isnan(pos.zenith_deg)

    def test_north_pole_zenith_is_complement_of_declination(self):
        obs = Observer(latitude_deg=90.0, longitude_deg=0.0)
        pos = compute_solar_position(obs, CalendarInstant(2003, 6, 21, 12))
        assert pos.geometric_zenith_deg == pytest.approx(90.0 - pos.declination_deg, abs=1e-6)


class TestPositionRanges:

    @pytest.mark.parametrize("lat", [-90.0, -70.0, -33.9, 0.0, 39.7, 78.2, 90.0])
    @pytest.mark.parametrize("lon", [-180.0, -105.2, 0.0, 151.2, 180.0])
    def test_azimuth_and_zenith_in_range(self, lat, lon):
        obs = Observer(latitude_deg=lat, longitude_deg=lon, utc_offset_hours=round(lon / 15.0) % 13)
        for month in (1, 3, 6, 9, 12):
            for hour in (0, 5, 11, 17, 23):
                pos = compute_solar_position(obs, CalendarInstant(2026, month, 15, hour, 7, 11))
                assert 0.0 <= pos.azimuth_deg < 360.0
                assert 0.0 <= pos.zenith_deg <= 180.0

    @pytest.mark.parametrize("year", [-2000, 1000, 1900, 2100, 3000, 6000])
    def test_distant_years(self, year):
        pos = compute_solar_position(_GOLDEN, CalendarInstant(year, 3, 1, 9))
        assert 0.0 <= pos.azimuth_deg < 360.0
        assert 0.0 <= pos.zenith_deg <= 180.0


# ── Day events ───────────────────────────────────────────────────────

class TestComputeDayEvents:

    def test_returns_day_events(self):
        assert isinstance(compute_day_events(_GOLDEN, _INSTANT), DayEvents)

    def test_sunrise(self):
        """06:12 local."""
        events = compute_day_events(_GOLDEN, _INSTANT)
        assert isinstance(events.sunrise, SolarEvent)
        assert events.sunrise.local_minutes == pytest.approx(6 * 60 + 12 + 43 / 60, abs=1.0)

    def test_sunset(self):
        """17:19 local (SPA gives 17:20:19)."""
        events = compute_day_events(_GOLDEN, _INSTANT)
        assert isinstance(events.sunset, SolarEvent)
        assert events.sunset.local_minutes == pytest.approx(17 * 60 + 18 + 51 / 60, abs=0.1)

    def test_solar_noon(self):
        events = compute_day_events(_GOLDEN, _INSTANT)
        assert events.solar_noon_min == pytest.approx(706.07, abs=0.01)

    def test_time_of_day_is_ignored(self):
        morning = compute_day_events(_GOLDEN, CalendarInstant(2003, 10, 17, 1))
        evening = compute_day_events(_GOLDEN, CalendarInstant(2003, 10, 17, 23, 59, 59))
        assert morning == evening

    def test_dst(self):
        dst_observer = Observer(39.742476, -105.1786, -7.0, daylight_saving=True)
        std = compute_day_events(_GOLDEN, _INSTANT)
        dst = compute_day_events(dst_observer, _INSTANT)
        assert dst.solar_noon_min == pytest.approx(std.solar_noon_min + 60.0)
        assert dst.sunset.local_minutes == pytest.approx(std.sunset.local_minutes + 60.0)

    def test_polar_day_has_no_rise_or_set(self):
        obs = Observer(latitude_deg=78.2232, longitude_deg=15.6267, utc_offset_hours=1.0)
        events = compute_day_events(obs, CalendarInstant(2026, 6, 21))
        assert isinstance(events.sunrise, NoEvent)
        assert isinstance(events.sunset, NoEvent)
        assert events.sunrise.condition is PolarCondition.POLAR_DAY
        assert events.sunrise.nearest is not None
        assert events.sunset.nearest is not None

    def test_polar_night_has_no_rise_or_set(self):
        obs = Observer(latitude_deg=78.2232, longitude_deg=15.6267, utc_offset_hours=1.0)
        events = compute_day_events(obs, CalendarInstant(2026, 12, 21))
        assert events.sunrise.condition is PolarCondition.POLAR_NIGHT
        assert events.sunset.condition is PolarCondition.POLAR_NIGHT

    def test_pole_terminates(self):
        obs = Observer(latitude_deg=90.0, longitude_deg=0.0)
        events = compute_day_events(obs, CalendarInstant(2026, 6, 21))
        assert isinstance(events.sunrise, NoEvent)
        assert events.sunrise.nearest is None
        assert events.sunset.nearest is None

    def test_no_event_is_never_a_number(self):
        obs = Observer(latitude_deg=78.2232, longitude_deg=15.6267, utc_offset_hours=1.0)
        events = compute_day_events(obs, CalendarInstant(2026, 6, 21))
        assert not isinstance(events.sunrise, (int, float))
        assert not hasattr(events.sunrise, "local_minutes")


# ── Bundled result ───────────────────────────────────────────────────

class TestComputeSunlight:

    def test_bundles_both_results(self):
        sunlight = compute_sunlight(_GOLDEN, _INSTANT)
        assert isinstance(sunlight, Sunlight)
        assert sunlight.observer == _GOLDEN
        assert sunlight.instant == _INSTANT
        assert sunlight.position == compute_solar_position(_GOLDEN, _INSTANT)
        assert sunlight.events == compute_day_events(_GOLDEN, _INSTANT)


# ── Invalid input ────────────────────────────────────────────────────

class TestInvalidInput:

    def test_latitude(self):
        with pytest.raises(InvalidInputError):
            compute_solar_position(Observer(95.0, 0.0), _INSTANT)

    def test_longitude(self):
        with pytest.raises(InvalidInputError):
            compute_day_events(Observer(0.0, -200.0), _INSTANT)

    def test_impossible_date(self):
        with pytest.raises(InvalidInputError):
            compute_solar_position(_GOLDEN, CalendarInstant(2003, 2, 30))

    def test_month_out_of_range(self):
        with pytest.raises(InvalidInputError):
            compute_day_events(_GOLDEN, CalendarInstant(2003, 13, 1))


# ── Domain purity ────────────────────────────────────────────────────

class TestEphemerisPurity:

    @pytest.mark.parametrize("module_name", [
        "meridian.domain.ephemeris",
        "meridian.domain.observer",
        "meridian.domain.almanac",
        "meridian.domain.serialization",
    ])
    def test_module_pure(self, module_name):
        """Domain modules import only stdlib modules and numpy."""
        import importlib
        mod = importlib.import_module(module_name)

        allowed = {'math', 'numpy', 'logging', 'dataclasses', 'typing', 'abc',
                   'enum', '__future__', 'datetime'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    assert root in allowed, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    assert root in allowed or root == 'meridian', (
                        f"Disallowed import from '{node.module}'"
                    )
