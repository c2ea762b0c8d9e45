# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for host capabilities.

Adapters implement these to supply textures, drawing surfaces, clocks,
the reference location and configuration files.
"""
from typing import Protocol, runtime_checkable

from orbitview.domain.config import ScheduleConfig, SimulationConfig
from orbitview.ports.clock import FrameCallback, FrameClock, WallClock
from orbitview.ports.location import GeolocationProvider
from orbitview.ports.rendering import RenderSurface, TextureSampler


@runtime_checkable
class ConfigReader(Protocol):
    """Port for reading simulation configuration."""

    def read_config(self, path: str) -> tuple[SimulationConfig, ScheduleConfig]:
        """Read and validate a configuration file."""
        ...


__all__ = [
    "ConfigReader",
    "FrameCallback",
    "FrameClock",
    "GeolocationProvider",
    "RenderSurface",
    "TextureSampler",
    "WallClock",
]
