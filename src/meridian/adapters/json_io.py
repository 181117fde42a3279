# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON ephemeris report adapter.

Writes a single-instant sunlight report in JSON format.
"""
import json

from meridian.ports import EphemerisWriter
from meridian.domain.ephemeris import Sunlight
from meridian.domain.serialization import sunlight_to_dict


class JsonEphemerisWriter(EphemerisWriter):
    """Writes sunlight reports to JSON files."""

    def write(self, sunlight: Sunlight, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(sunlight_to_dict(sunlight), f, indent=2, ensure_ascii=False)
