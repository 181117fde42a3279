# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV almanac exporter.

Exports one row per local date with noon position and rise/set times.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from meridian.ports.export import AlmanacExporter
from meridian.domain.almanac import AlmanacEntry
from meridian.domain.day_events import NoEvent
from meridian.domain.serialization import format_clock_time, format_rise_set

logger = logging.getLogger(__name__)

_HEADER = [
    'date', 'solar_noon', 'sunrise', 'sunset', 'day_length_min',
    'noon_zenith_deg', 'noon_azimuth_deg', 'equation_of_time_min',
    'declination_deg',
]


class CsvAlmanacExporter(AlmanacExporter):
    """Exports almanac entries to CSV."""

    def export(self, entries: list[AlmanacEntry], path: str) -> int:
        polar_days = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for entry in entries:
                events = entry.events
                if isinstance(events.sunrise, NoEvent) or isinstance(events.sunset, NoEvent):
                    polar_days += 1
                day_length = events.day_length_min

                writer.writerow([
                    entry.day.isoformat(),
                    format_clock_time(events.solar_noon_min),
                    format_rise_set(events.sunrise),
                    format_rise_set(events.sunset),
                    '' if day_length is None else f'{day_length:.1f}',
                    f'{entry.noon_zenith_deg:.4f}',
                    f'{entry.noon_azimuth_deg:.4f}',
                    f'{entry.equation_of_time_min:.4f}',
                    f'{entry.declination_deg:.4f}',
                ])

        if polar_days:
            logger.info("%d of %d days without sunrise or sunset", polar_days, len(entries))
        return len(entries)
