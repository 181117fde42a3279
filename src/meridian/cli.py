# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the solar ephemeris.

Usage:
    # Sun position and day events at a local clock instant
    meridian --lat 39.742476 --lon -105.1786 --date 2003-10-17 --time 12:30:30 --utc-offset -7

    # Daylight saving in effect
    meridian --lat 52.37 --lon 4.90 --date 2026-07-01 --time 14:00 --utc-offset 1 --dst

    # Write the report as JSON
    meridian --lat 39.74 --lon -105.18 --date 2003-10-17 --utc-offset -7 --json report.json

    # Export a 30-day almanac to CSV
    meridian --lat 69.65 --lon 18.96 --date 2026-05-01 --utc-offset 1 --almanac-csv may.csv --days 30
"""
import argparse
import logging
import sys
from datetime import date

from meridian.domain.almanac import compute_almanac
from meridian.domain.ephemeris import Sunlight, compute_sunlight
from meridian.domain.observer import CalendarInstant, Observer
from meridian.domain.serialization import format_clock_time, format_rise_set
from meridian.adapters.csv_exporter import CsvAlmanacExporter
from meridian.adapters.json_io import JsonEphemerisWriter


def parse_clock(text: str) -> tuple[int, int, float]:
    """Parse HH:MM or HH:MM:SS into (hour, minute, second)."""
    parts = text.split(':')
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid time '{text}', expected HH:MM or HH:MM:SS")
    try:
        hour = int(parts[0])
        minute = int(parts[1])
        second = float(parts[2]) if len(parts) == 3 else 0.0
    except ValueError:
        raise ValueError(f"Invalid time '{text}', expected HH:MM or HH:MM:SS") from None
    return hour, minute, second


def parse_date(text: str) -> date:
    """Parse an ISO date (YYYY-MM-DD)."""
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date '{text}', expected YYYY-MM-DD") from None


def format_report(sunlight: Sunlight) -> str:
    """Multi-line human-readable report."""
    pos = sunlight.position
    events = sunlight.events
    lines = [
        f"Equation of time:  {pos.equation_of_time_min:8.2f} min",
        f"Declination:       {pos.declination_deg:8.2f} deg",
        f"Right ascension:   {pos.right_ascension_deg:8.2f} deg",
        f"Hour angle:        {pos.hour_angle_deg:8.2f} deg",
        f"Azimuth:           {pos.azimuth_deg:8.2f} deg",
        f"Elevation:         {pos.elevation_deg:8.2f} deg",
        f"Zenith:            {pos.zenith_deg:8.2f} deg",
        f"Solar noon:        {format_clock_time(events.solar_noon_min)}",
        f"Sunrise:           {format_rise_set(events.sunrise)}",
        f"Sunset:            {format_rise_set(events.sunset)}",
    ]
    day_length = events.day_length_min
    if day_length is not None:
        hours, mins = divmod(int(round(day_length)), 60)
        lines.append(f"Day length:        {hours}h {mins:02d}m")
    return "\n".join(lines)


def run(
    latitude_deg: float,
    longitude_deg: float,
    day: date,
    clock: tuple[int, int, float],
    utc_offset_hours: float,
    dst: bool = False,
) -> Sunlight:
    """Compute the sunlight report for one observer and local instant."""
    observer = Observer(
        latitude_deg=latitude_deg,
        longitude_deg=longitude_deg,
        utc_offset_hours=utc_offset_hours,
        daylight_saving=dst,
    )
    hour, minute, second = clock
    instant = CalendarInstant(day.year, day.month, day.day, hour, minute, second)
    return compute_sunlight(observer, instant)


def main():
    parser = argparse.ArgumentParser(
        description="Compute sun position, solar noon, sunrise and sunset (NOAA algorithm)",
    )
    parser.add_argument(
        '--lat', type=float, required=True,
        help="Observer latitude in degrees, north positive",
    )
    parser.add_argument(
        '--lon', type=float, required=True,
        help="Observer longitude in degrees, east positive",
    )
    parser.add_argument(
        '--date', required=True,
        help="Local date, YYYY-MM-DD",
    )
    parser.add_argument(
        '--time', default='12:00:00',
        help="Local clock time, HH:MM[:SS] (default: 12:00:00)",
    )
    parser.add_argument(
        '--utc-offset', type=float, default=0.0,
        help="Standard-time UTC offset in hours, east positive (default: 0)",
    )
    parser.add_argument(
        '--dst', action='store_true',
        help="Daylight saving time is in effect",
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help="Enable debug logging",
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--json', metavar='PATH',
        help="Write the report as JSON",
    )
    export_group.add_argument(
        '--almanac-csv', metavar='PATH',
        help="Export a day-by-day almanac starting at --date to CSV",
    )
    export_group.add_argument(
        '--days', type=int, default=30,
        help="Number of days in the almanac (default: 30)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        day = parse_date(args.date)
        clock = parse_clock(args.time)
        sunlight = run(args.lat, args.lon, day, clock, args.utc_offset, args.dst)
        print(format_report(sunlight))

        if args.json:
            JsonEphemerisWriter().write(sunlight, args.json)
            print(f"Wrote report to {args.json}")

        if args.almanac_csv:
            entries = compute_almanac(sunlight.observer, day, args.days)
            n = CsvAlmanacExporter().export(entries, args.almanac_csv)
            print(f"Exported {n} days to {args.almanac_csv}")
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
