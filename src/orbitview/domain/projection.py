# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Perspective projection and sphere occlusion.

A view basis (C, U, V) maps an orbital-space point onto the view plane:

    x = pos·U    y = pos·V    z = pos·C
    rho2 = x² + y²
    visible = rho2 > 1  or  z >= sqrt(max(0, 1 - rho2))

A point is drawn when it falls outside the unit sphere's silhouette or
lies on the camera-facing hemisphere. Screen coordinates flip y so the
view plane's "up" maps to decreasing pixel rows.
"""
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from orbitview.domain.geodetic_frame import GeodeticBasis, Vec3

ViewBasis = GeodeticBasis


@dataclass(frozen=True)
class ProjectedPoints:
    """View-plane coordinates and visibility flags for a batch of points."""
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    visible: np.ndarray


def project_points(points: np.ndarray, view: ViewBasis) -> ProjectedPoints:
    """
    Project orbital-space points into a view plane.

    Args:
        points: Array of shape (N, 3) or (3,).
        view: View basis of the camera.

    Returns:
        ProjectedPoints with arrays of length N.
    """
    pts = np.atleast_2d(np.asarray(points, dtype=float))
    x = pts @ np.asarray(view.tangent_u)
    y = pts @ np.asarray(view.tangent_v)
    z = pts @ np.asarray(view.forward)
    rho2 = x * x + y * y
    near_surface = np.sqrt(np.maximum(0.0, 1.0 - rho2))
    visible = (rho2 > 1.0) | (z >= near_surface)
    return ProjectedPoints(x=x, y=y, z=z, visible=visible)


def is_visible(point: Vec3 | np.ndarray, view: ViewBasis) -> bool:
    """True if a single point is not occluded by the unit sphere."""
    return bool(project_points(np.asarray(point, dtype=float), view).visible[0])


def to_screen(
    x: float | np.ndarray,
    y: float | np.ndarray,
    center: tuple[float, float],
    earth_radius_px: float,
) -> tuple[float | np.ndarray, float | np.ndarray]:
    """View-plane coordinates to pixels: (cx + R·x, cy - R·y)."""
    cx, cy = center
    return cx + earth_radius_px * x, cy - earth_radius_px * y


def split_runs(points: np.ndarray, mask: np.ndarray) -> Iterator[np.ndarray]:
    """Yield the contiguous stretches of points where mask is True."""
    flags = np.concatenate(([0], np.asarray(mask, dtype=np.int8), [0]))
    edges = np.flatnonzero(np.diff(flags))
    for start, stop in zip(edges[0::2], edges[1::2]):
        yield points[start:stop]

