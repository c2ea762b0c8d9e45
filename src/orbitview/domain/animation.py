# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Frame-driven animation loop and schedule refresh.

The host's frame clock calls FrameLoop.step(timestamp_ms). Each step
derives dt from the previous timestamp (variable step, no fixed
timestep), ticks the simulation, and then renders every view from a
snapshot taken after the tick. Stopping the loop only discards the
clock registration; each step is self-contained.

The overflight schedule runs on its own, slower timer through
ScheduleTicker.refresh().
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime

import numpy as np

from orbitview.domain.overflight import FreeInterval
from orbitview.domain.propagation import TerminalEvent
from orbitview.domain.rendering import render_view
from orbitview.domain.simulation import Simulation
from orbitview.domain.views import ViewConfig
from orbitview.ports.clock import FrameClock, WallClock
from orbitview.ports.rendering import RenderSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameResult:
    """Outcome of one animation step."""
    timestamp_ms: float
    dt: float
    events: tuple[TerminalEvent, ...]
    drawn: dict[str, list[str]] = field(default_factory=dict)


class FrameLoop:
    """Drives a Simulation and its views from a frame clock."""

    def __init__(
        self,
        simulation: Simulation,
        views: list[ViewConfig],
        surfaces: dict[str, RenderSurface],
        clock: FrameClock,
        backgrounds: dict[str, np.ndarray] | None = None,
    ) -> None:
        missing = [view.name for view in views if view.name not in surfaces]
        if missing:
            raise ValueError(f"No surface for views: {', '.join(missing)}")
        self.simulation = simulation
        self.views = views
        self.surfaces = surfaces
        self.clock = clock
        self.backgrounds = backgrounds or {}
        self.last_result: FrameResult | None = None
        self._last_timestamp: float | None = None
        self._token: int | None = None
        self._active = False

    @property
    def running(self) -> bool:
        return self._active

    def start(self) -> None:
        """Register with the frame clock. No-op if already running."""
        if self._active:
            return
        self._active = True
        self._token = self.clock.request_frame(self._on_frame)

    def stop(self) -> None:
        """Discard the pending frame registration."""
        self._active = False
        if self._token is not None:
            self.clock.cancel_frame(self._token)
            self._token = None

    def _on_frame(self, timestamp_ms: float) -> None:
        self._token = None
        self.step(timestamp_ms)
        if self._active:
            self._token = self.clock.request_frame(self._on_frame)

    def step(self, timestamp_ms: float) -> FrameResult:
        """
        Advance the simulation to timestamp_ms and render all views.

        The first step has dt = 0. A timestamp earlier than the previous
        one is treated as dt = 0.
        """
        if self._last_timestamp is None:
            dt = 0.0
        else:
            dt = (timestamp_ms - self._last_timestamp) / 1000.0
            if dt < 0:
                logger.warning(
                    "Frame timestamp went backwards (%.1f ms -> %.1f ms)",
                    self._last_timestamp, timestamp_ms,
                )
                dt = 0.0
        self._last_timestamp = timestamp_ms

        events = self.simulation.tick(dt)
        snapshot = self.simulation.snapshot()
        config = self.simulation.config

        drawn: dict[str, list[str]] = {}
        for view in self.views:
            drawn[view.name] = render_view(
                view, snapshot, self.surfaces[view.name], config,
                background=self.backgrounds.get(view.name),
            )

        self.last_result = FrameResult(
            timestamp_ms=timestamp_ms,
            dt=dt,
            events=tuple(events),
            drawn=drawn,
        )
        return self.last_result


class ScheduleTicker:
    """Recomputes the free-interval schedule from the wall clock."""

    def __init__(self, simulation: Simulation, wall_clock: WallClock) -> None:
        self.simulation = simulation
        self.wall_clock = wall_clock
        self.intervals: list[FreeInterval] = []
        self.updated_at: datetime | None = None

    def refresh(self) -> list[FreeInterval]:
        """Recompute intervals for the current wall-clock time."""
        now = self.wall_clock.now()
        self.intervals = self.simulation.free_intervals(now)
        self.updated_at = now
        logger.debug(
            "Free intervals at %s: %s",
            now.isoformat(),
            ", ".join(f"{i.start.isoformat()}+{i.duration_text}" for i in self.intervals),
        )
        return self.intervals
