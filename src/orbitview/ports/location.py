# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for acquiring the reference location.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class GeolocationProvider(Protocol):
    """Port for the user's geodetic location."""

    def locate(self) -> tuple[float, float]:
        """
        Return (lat_deg, lon_deg).

        Raises:
            GeolocationError: If the location is unavailable or denied.
        """
        ...
