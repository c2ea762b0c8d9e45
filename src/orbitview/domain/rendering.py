# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Drawing commands for one camera view.

Every satellite above the surface contributes its trajectory (only the
visible stretches) and, when its current position is visible, a filled
marker. Auxiliary views also carry a per-satellite rate legend.
"""
from typing import Iterable

import numpy as np

from orbitview.domain.config import SimulationConfig
from orbitview.domain.projection import project_points, split_runs, to_screen
from orbitview.domain.simulation import SimulationSnapshot
from orbitview.domain.trajectory import satellite_position, trajectory_arcs
from orbitview.domain.views import ViewConfig, ViewMode
from orbitview.ports.rendering import RenderSurface

TRAJECTORY_WIDTH = 2.0

_LEGEND_LABELS = {
    ViewMode.U: "U-comp",
    ViewMode.V: "V-comp",
    ViewMode.NET: "Net",
}
_LEGEND_RIGHT_MARGIN = 180
_LEGEND_TOP = 50
_LEGEND_SPACING = 40


def satellite_legend(snapshot: SimulationSnapshot, mode: ViewMode) -> list[str]:
    """Legend lines: the rate component each auxiliary view illustrates."""
    label = _LEGEND_LABELS[mode]
    lines = []
    for i, sat in enumerate(snapshot.satellites):
        if mode is ViewMode.U:
            speed = sat.speed_u
        elif mode is ViewMode.V:
            speed = sat.speed_v
        else:
            speed = sat.angular_speed
        lines.append(f"Sat {i + 1} {label}: {speed:.2f} rad/s")
    return lines


def trajectory_segments(
    arcs: Iterable[np.ndarray],
    view: ViewConfig,
) -> list[np.ndarray]:
    """Project 3-D arcs into screen-space segments, split at occlusions."""
    segments: list[np.ndarray] = []
    for arc in arcs:
        if len(arc) == 0:
            continue
        projected = project_points(arc, view.basis)
        sx, sy = to_screen(projected.x, projected.y, view.center_px, view.earth_radius_px)
        screen = np.column_stack([sx, sy])
        segments.extend(
            run for run in split_runs(screen, projected.visible) if len(run) >= 2
        )
    return segments


def render_view(
    view: ViewConfig,
    snapshot: SimulationSnapshot,
    surface: RenderSurface,
    config: SimulationConfig,
    background: np.ndarray | None = None,
) -> list[str]:
    """
    Emit the drawing commands for one view.

    Args:
        view: Camera to render.
        snapshot: Post-tick simulation state.
        surface: Drawing surface.
        config: Simulation parameters.
        background: Optional pre-rendered globe image.

    Returns:
        Ids of the satellites whose markers were drawn.
    """
    if background is not None:
        surface.draw_image(background)

    orbital_basis = snapshot.orbital_basis
    live = [sat for sat in snapshot.satellites if sat.radius >= config.body_radius]

    for sat in live:
        arcs = trajectory_arcs(sat, orbital_basis, config, primary=view.primary)
        segments = trajectory_segments(arcs, view)
        if segments:
            surface.stroke_path(segments, sat.color, TRAJECTORY_WIDTH)

    drawn: list[str] = []
    for sat in live:
        projected = project_points(satellite_position(sat, orbital_basis), view.basis)
        if not projected.visible[0]:
            continue
        px, py = to_screen(
            float(projected.x[0]), float(projected.y[0]),
            view.center_px, view.earth_radius_px,
        )
        surface.fill_circle(px, py, config.marker_radius_px, sat.color)
        drawn.append(sat.sat_id)

    if not view.primary:
        legend = satellite_legend(snapshot, view.mode)
        for i, (sat, line) in enumerate(zip(snapshot.satellites, legend)):
            surface.draw_text(
                view.width - _LEGEND_RIGHT_MARGIN,
                _LEGEND_TOP + i * _LEGEND_SPACING,
                line,
                sat.color,
            )

    return drawn
