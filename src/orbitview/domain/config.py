# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simulation and scheduling configuration.

Units are normalized: the central body has radius 1 and the
gravitational parameter is an arbitrary constant. The escape
threshold and radial damping factor are empirical and kept
configurable rather than fixed.
"""
import math
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable propagation and rendering parameters."""
    gm: float = 0.137
    body_radius: float = 1.0
    escape_radius: float = 50.0
    radial_damping: float = 0.1
    altitude_scale_km: float = 200.0   # km per unit radius above the surface
    trajectory_step_rad: float = 0.01
    circular_tolerance: float = 1e-6
    marker_radius_px: float = 5.0

    def __post_init__(self) -> None:
        if not self.gm > 0:
            raise ValueError(f"gm must be positive, got {self.gm}")
        if not self.body_radius > 0:
            raise ValueError(f"body_radius must be positive, got {self.body_radius}")
        if not self.escape_radius > self.body_radius:
            raise ValueError(
                f"escape_radius ({self.escape_radius}) must exceed "
                f"body_radius ({self.body_radius})"
            )
        if not self.radial_damping > 0:
            raise ValueError(f"radial_damping must be positive, got {self.radial_damping}")
        if not self.altitude_scale_km > 0:
            raise ValueError(
                f"altitude_scale_km must be positive, got {self.altitude_scale_km}"
            )
        if not 0 < self.trajectory_step_rad < math.pi:
            raise ValueError(
                f"trajectory_step_rad must be in (0, pi), got {self.trajectory_step_rad}"
            )
        if self.circular_tolerance < 0:
            raise ValueError(
                f"circular_tolerance must be non-negative, got {self.circular_tolerance}"
            )


@dataclass(frozen=True)
class ScheduleConfig:
    """Immutable overflight scheduling parameters."""
    crossings_per_satellite: int = 4
    interval_count: int = 3
    dedup_tolerance: timedelta = timedelta(seconds=1)
    padding: timedelta = timedelta(hours=1)
    min_angular_rate: float = 1e-6

    def __post_init__(self) -> None:
        if self.crossings_per_satellite < 1:
            raise ValueError(
                f"crossings_per_satellite must be >= 1, got {self.crossings_per_satellite}"
            )
        if self.interval_count < 1:
            raise ValueError(f"interval_count must be >= 1, got {self.interval_count}")
        if self.dedup_tolerance < timedelta(0):
            raise ValueError(f"dedup_tolerance must be non-negative, got {self.dedup_tolerance}")
        if self.padding <= timedelta(0):
            raise ValueError(f"padding must be positive, got {self.padding}")


DEFAULT_CONFIG: SimulationConfig = SimulationConfig()
DEFAULT_SCHEDULE: ScheduleConfig = ScheduleConfig()
