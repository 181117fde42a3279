# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for ephemeris report export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from meridian.adapters.csv_exporter import CsvAlmanacExporter
from meridian.adapters.json_io import JsonEphemerisWriter

__all__ = ["CsvAlmanacExporter", "JsonEphemerisWriter"]
