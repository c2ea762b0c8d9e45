# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Trajectory sampling for path rendering.

Samples the full path of a satellite as 3-D points in orbital space.
The orbital plane is spanned by the orbital center axis C and the
in-plane direction dir = cos(a)·U + sin(a)·V, where a is the
satellite's plane angle; an in-plane angle t maps to

    pos = r · (cos t · C + sin t · dir)

Circular paths sample t over [0, 2pi]. Conic paths sample the true
anomaly f, over [0, 2pi] for ellipses and over (-acos(-1/e), acos(-1/e))
for parabolic/hyperbolic orbits, with r(f) = p / (1 + e·cos f). Points
that cannot be drawn break the path into separate arcs.

Arcs are recomputed on every call: the elements change every tick.
"""
import math
from typing import Iterator

import numpy as np

from orbitview.domain.config import SimulationConfig
from orbitview.domain.geodetic_frame import GeodeticBasis
from orbitview.domain.projection import split_runs
from orbitview.domain.satellite import ConicElements, Satellite

TWO_PI = 2.0 * math.pi


def plane_direction(plane_angle: float, basis: GeodeticBasis) -> np.ndarray:
    """In-plane unit direction cos(a)·U + sin(a)·V."""
    return (
        math.cos(plane_angle) * np.asarray(basis.tangent_u)
        + math.sin(plane_angle) * np.asarray(basis.tangent_v)
    )


def _plane_points(
    radii: np.ndarray,
    angles: np.ndarray,
    plane_angle: float,
    basis: GeodeticBasis,
) -> np.ndarray:
    center = np.asarray(basis.forward)
    direction = plane_direction(plane_angle, basis)
    cos_t = np.cos(angles)[:, None]
    sin_t = np.sin(angles)[:, None]
    return radii[:, None] * (cos_t * center + sin_t * direction)


def _closed_range(start: float, stop: float, step: float) -> np.ndarray:
    samples = np.arange(start, stop, step)
    return np.append(samples, stop)


def satellite_position(sat: Satellite, basis: GeodeticBasis) -> np.ndarray:
    """Current 3-D position of a satellite in orbital space."""
    points = _plane_points(
        np.array([sat.radius]), np.array([sat.anomaly]), sat.plane_angle, basis,
    )
    return points[0]


def circular_path(
    radius: float,
    plane_angle: float,
    basis: GeodeticBasis,
    step: float = 0.01,
) -> np.ndarray:
    """
    Sample a circular orbit.

    Args:
        radius: Orbit radius.
        plane_angle: Orientation of the orbital plane in the U/V plane.
        basis: Orbital basis.
        step: Angular sampling step in radians.

    Returns:
        Array of shape (N, 3), closed (first and last point coincide).
    """
    phi = _closed_range(0.0, TWO_PI, step)
    radii = np.full(phi.shape, float(radius))
    return _plane_points(radii, phi, plane_angle, basis)


def conic_arcs(
    elements: ConicElements,
    plane_angle: float,
    basis: GeodeticBasis,
    step: float = 0.01,
    occlude_body: bool = False,
    body_radius: float = 1.0,
    max_radius: float | None = None,
) -> Iterator[np.ndarray]:
    """
    Sample a conic orbit as one or more arcs.

    Args:
        elements: Conic elements of the orbit.
        plane_angle: Orientation of the orbital plane in the U/V plane.
        basis: Orbital basis.
        step: True-anomaly sampling step in radians.
        occlude_body: Break the path where r(f) < body_radius.
        body_radius: Radius of the central body.
        max_radius: Break the path where r(f) exceeds this radius.

    Yields:
        Arrays of shape (N, 3), one per contiguous drawable stretch.
    """
    e = elements.eccentricity
    p = elements.semi_latus_rectum

    if e < 1.0:
        f = _closed_range(0.0, TWO_PI, step)
    else:
        f_limit = math.acos(-1.0 / e)
        f = _closed_range(-f_limit, f_limit, step)

    denom = 1.0 + e * np.cos(f)
    with np.errstate(divide="ignore", invalid="ignore"):
        radii = p / denom

    drawable = np.isfinite(radii) & (denom > 0.0) & (radii > 0.0)
    if occlude_body:
        drawable &= radii >= body_radius
    if max_radius is not None:
        drawable &= radii <= max_radius

    safe_radii = np.where(drawable, radii, 0.0)
    points = _plane_points(safe_radii, elements.periapsis_angle + f, plane_angle, basis)
    yield from split_runs(points, drawable)


def trajectory_arcs(
    sat: Satellite,
    basis: GeodeticBasis,
    config: SimulationConfig,
    primary: bool = False,
) -> Iterator[np.ndarray]:
    """
    Sample the full path of a satellite.

    Demo satellites trace their circle; custom satellites trace the conic
    defined by their current elements. A custom satellite without
    angular momentum has no path.

    Args:
        sat: Satellite to sample.
        basis: Orbital basis.
        config: Simulation parameters (sampling step, radii).
        primary: True for the main view, where the part of a conic
            inside the central body is hidden.

    Yields:
        Arrays of shape (N, 3).
    """
    step = config.trajectory_step_rad
    if sat.is_demo:
        yield circular_path(sat.radius, sat.plane_angle, basis, step)
        return

    if sat.elements is None:
        return

    yield from conic_arcs(
        sat.elements, sat.plane_angle, basis, step,
        occlude_body=primary,
        body_radius=config.body_radius,
        max_radius=config.escape_radius,
    )
