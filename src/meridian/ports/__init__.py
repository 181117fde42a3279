# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for ephemeris report I/O.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from meridian.domain.ephemeris import Sunlight
from meridian.ports.export import AlmanacExporter


@runtime_checkable
class EphemerisWriter(Protocol):
    """Port for writing a single-instant sunlight report."""

    def write(self, sunlight: Sunlight, path: str) -> None:
        """Write the report to an output file."""
        ...


__all__ = ["AlmanacExporter", "EphemerisWriter"]
