# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simulation state owner.

The Simulation holds the satellite list and the orbital basis. It is the
only writer: tick(), add_satellite() and the remove_* methods mutate
state; every reader (renderer, scheduler, exporters) works from a
snapshot taken after the writer's pass.
"""
import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime

from orbitview.domain.config import (
    DEFAULT_CONFIG,
    DEFAULT_SCHEDULE,
    ScheduleConfig,
    SimulationConfig,
)
from orbitview.domain.errors import InputValidationError
from orbitview.domain.geodetic_frame import GeodeticBasis, geodetic_basis
from orbitview.domain.overflight import FreeInterval, compute_free_intervals
from orbitview.domain.propagation import TerminalEvent, propagate
from orbitview.domain.requests import AddSatelliteRequest, OrbitTypeRequest
from orbitview.domain.satellite import (
    SATELLITE_COLORS,
    Satellite,
    altitude_km_to_radius,
    circular_rate,
    custom_satellite,
    demo_satellites,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationSnapshot:
    """Read-only copy of the simulation state after a tick."""
    orbital_basis: GeodeticBasis
    satellites: tuple[Satellite, ...]
    elapsed_s: float
    tick_count: int


class Simulation:
    """Owns the satellites and advances them."""

    def __init__(
        self,
        lat_deg: float,
        lon_deg: float,
        config: SimulationConfig = DEFAULT_CONFIG,
        schedule: ScheduleConfig = DEFAULT_SCHEDULE,
        satellites: list[Satellite] | None = None,
    ) -> None:
        self.lat_deg = lat_deg
        self.lon_deg = lon_deg
        self.config = config
        self.schedule = schedule
        self.orbital_basis = geodetic_basis(lat_deg, lon_deg)
        self._satellites: list[Satellite] = list(satellites or [])
        self._counter = len(self._satellites)
        self.elapsed_s = 0.0
        self.tick_count = 0

    @classmethod
    def with_demo_satellites(
        cls,
        lat_deg: float,
        lon_deg: float,
        config: SimulationConfig = DEFAULT_CONFIG,
        schedule: ScheduleConfig = DEFAULT_SCHEDULE,
    ) -> "Simulation":
        """Simulation pre-populated with the five demo satellites."""
        return cls(
            lat_deg, lon_deg, config=config, schedule=schedule,
            satellites=demo_satellites(config),
        )

    def _next_id(self) -> str:
        self._counter += 1
        return f"sat-{self._counter}"

    @property
    def satellite_count(self) -> int:
        return len(self._satellites)

    def satellite_ids(self) -> list[str]:
        return [sat.sat_id for sat in self._satellites]

    def tick(self, dt: float) -> list[TerminalEvent]:
        """
        Advance every satellite by dt seconds.

        Crashed and escaped satellites are removed before this returns.

        Raises:
            ValueError: If dt is negative.
        """
        events = propagate(self._satellites, dt, self.config)
        self.elapsed_s += dt
        self.tick_count += 1
        return events

    def add_satellite(self, request: AddSatelliteRequest | OrbitTypeRequest) -> Satellite:
        """
        Append a custom two-body satellite.

        Returns:
            A copy of the new satellite's initial state.

        Raises:
            InputValidationError: If the request type is not supported.
        """
        if isinstance(request, OrbitTypeRequest):
            speed_u, speed_v = self._profile_rates(request)
        elif isinstance(request, AddSatelliteRequest):
            speed_u, speed_v = request.speed_u, request.speed_v
        else:
            raise InputValidationError(
                f"Unsupported satellite request: {type(request).__name__}"
            )

        sat_id = self._next_id()
        color = SATELLITE_COLORS[len(self._satellites) % len(SATELLITE_COLORS)]
        sat = custom_satellite(
            sat_id=sat_id,
            name=request.name or f"Sat {self._counter}",
            color=color,
            radius=altitude_km_to_radius(request.altitude_km, self.config),
            speed_u=speed_u,
            speed_v=speed_v,
            config=self.config,
        )
        self._satellites.append(sat)
        logger.info(
            "Added satellite %s (%s): r=%.3f, speedU=%.3f, speedV=%.3f, "
            "angularSpeed=%.3f, planeAngle=%.3f",
            sat.name, sat.color, sat.radius, sat.speed_u, sat.speed_v,
            sat.angular_speed, sat.plane_angle,
        )
        return replace(sat)

    def _profile_rates(self, request: OrbitTypeRequest) -> tuple[float, float]:
        radius = altitude_km_to_radius(request.altitude_km, self.config)
        omega = request.orbit_type.rate_factor * circular_rate(radius, self.config.gm)
        angle = math.radians(request.plane_angle_deg)
        return omega * math.cos(angle), omega * math.sin(angle)

    def remove_satellite(self, sat_id: str) -> Satellite:
        """Remove a satellite by id. Raises KeyError if not found."""
        for index, sat in enumerate(self._satellites):
            if sat.sat_id == sat_id:
                return self.remove_satellite_at(index)
        raise KeyError(f"Satellite not found: {sat_id}")

    def remove_satellite_at(self, index: int) -> Satellite:
        """
        Remove the satellite at a 0-based list position.

        Raises:
            InputValidationError: If the position is out of range.
        """
        if not 0 <= index < len(self._satellites):
            raise InputValidationError(
                "Invalid index. Please enter a valid satellite index."
            )
        sat = self._satellites.pop(index)
        logger.info("Deleted satellite %s (%s)", sat.name, sat.color)
        return sat

    def snapshot(self) -> SimulationSnapshot:
        """Copy of the current state for one read pass."""
        return SimulationSnapshot(
            orbital_basis=self.orbital_basis,
            satellites=tuple(replace(sat) for sat in self._satellites),
            elapsed_s=self.elapsed_s,
            tick_count=self.tick_count,
        )

    def free_intervals(self, now: datetime) -> list[FreeInterval]:
        """Next free intervals between overflights of the reference point."""
        return compute_free_intervals(self._satellites, now, self.schedule)
