# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geolocation adapters.
"""
import math

from orbitview.domain.errors import GeolocationError
from orbitview.ports.location import GeolocationProvider


class FixedLocation(GeolocationProvider):
    """A location supplied up front (CLI flags, config, tests)."""

    def __init__(self, lat_deg: float, lon_deg: float) -> None:
        self.lat_deg = lat_deg
        self.lon_deg = lon_deg

    def locate(self) -> tuple[float, float]:
        if not (math.isfinite(self.lat_deg) and math.isfinite(self.lon_deg)):
            raise GeolocationError(
                f"Location is not finite: ({self.lat_deg}, {self.lon_deg})"
            )
        if not -90.0 <= self.lat_deg <= 90.0:
            raise GeolocationError(f"Latitude out of range: {self.lat_deg}")
        if not -180.0 <= self.lon_deg <= 180.0:
            raise GeolocationError(f"Longitude out of range: {self.lon_deg}")
        return self.lat_deg, self.lon_deg
