# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for almanac export.

Adapters implement this to export daily solar tables in various formats.
"""
from typing import Protocol, runtime_checkable

from meridian.domain.almanac import AlmanacEntry


@runtime_checkable
class AlmanacExporter(Protocol):
    """Port for exporting almanac entries to file."""

    def export(self, entries: list[AlmanacEntry], path: str) -> int:
        """
        Export almanac entries to a file.

        Args:
            entries: Almanac entries in date order.
            path: Output file path.

        Returns:
            Number of entries exported.
        """
        ...
