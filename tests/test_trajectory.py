# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for trajectory sampling."""
import math

import numpy as np
import pytest

from orbitview.domain.config import DEFAULT_CONFIG
from orbitview.domain.geodetic_frame import geodetic_basis
from orbitview.domain.satellite import (
    ConicElements,
    circular_rate,
    circular_satellite,
    custom_satellite,
    derive_conic_elements,
)
from orbitview.domain.trajectory import (
    circular_path,
    conic_arcs,
    plane_direction,
    satellite_position,
    trajectory_arcs,
)

BASIS = geodetic_basis(30.0, 45.0)
GM = DEFAULT_CONFIG.gm


# ── plane_direction / satellite_position ──────────────────────────

class TestPlaneGeometry:

    def test_plane_direction_zero_is_u(self):
        assert plane_direction(0.0, BASIS) == pytest.approx(np.asarray(BASIS.tangent_u))

    def test_plane_direction_quarter_is_v(self):
        d = plane_direction(math.pi / 2, BASIS)
        assert d == pytest.approx(np.asarray(BASIS.tangent_v), abs=1e-12)

    def test_zero_anomaly_is_over_reference_point(self):
        sat = circular_satellite("s", "S", "red", 1.5, 0.0, 0.1, 0.0)
        pos = satellite_position(sat, BASIS)
        assert pos == pytest.approx(1.5 * np.asarray(BASIS.forward))

    def test_position_has_satellite_radius(self):
        sat = circular_satellite("s", "S", "red", 1.7, 2.3, 0.1, 0.2)
        assert np.linalg.norm(satellite_position(sat, BASIS)) == pytest.approx(1.7)


# ── circular_path ─────────────────────────────────────────────────

class TestCircularPath:

    def test_constant_radius(self):
        path = circular_path(1.6, 0.4, BASIS, step=0.01)
        assert np.allclose(np.linalg.norm(path, axis=1), 1.6)

    def test_closed(self):
        path = circular_path(1.6, 0.4, BASIS, step=0.01)
        assert path[0] == pytest.approx(path[-1])

    def test_sample_count(self):
        path = circular_path(1.6, 0.0, BASIS, step=0.01)
        assert len(path) == len(np.arange(0.0, 2 * math.pi, 0.01)) + 1

    def test_lies_in_orbital_plane(self):
        """Every point is orthogonal to C × dir."""
        path = circular_path(1.6, 0.7, BASIS)
        normal = np.cross(np.asarray(BASIS.forward), plane_direction(0.7, BASIS))
        assert np.allclose(path @ normal, 0.0)


# ── conic_arcs ────────────────────────────────────────────────────

class TestConicArcs:

    def test_ellipse_is_one_closed_arc(self):
        el = derive_conic_elements(1.5, 0.0, 1.2 * math.sqrt(GM * 1.5), 0.0, GM)
        arcs = list(conic_arcs(el, 0.0, BASIS))
        assert len(arcs) == 1
        radii = np.linalg.norm(arcs[0], axis=1)
        p, e = el.semi_latus_rectum, el.eccentricity
        assert radii.min() == pytest.approx(p / (1 + e), rel=1e-4)
        assert radii.max() == pytest.approx(p / (1 - e), rel=1e-4)

    def test_ellipse_passes_through_current_position(self):
        r, anomaly = 1.5, 0.9
        el = derive_conic_elements(r, 0.02, 1.1 * math.sqrt(GM * r), anomaly, GM)
        sat = circular_satellite("s", "S", "red", r, anomaly, 0.1, 0.0)
        current = satellite_position(sat, BASIS)
        arc = next(conic_arcs(el, sat.plane_angle, BASIS, step=0.001))
        assert np.min(np.linalg.norm(arc - current, axis=1)) < 5e-3

    def test_hyperbola_stays_within_asymptotes(self):
        el = ConicElements(semi_latus_rectum=2.0, eccentricity=1.5,
                           anomaly_at_epoch=0.0, periapsis_angle=0.0)
        arcs = list(conic_arcs(el, 0.0, BASIS))
        assert arcs
        for arc in arcs:
            assert np.all(np.isfinite(arc))
            assert np.all(np.linalg.norm(arc, axis=1) > 0)

    def test_max_radius_breaks_path(self):
        el = ConicElements(semi_latus_rectum=2.0, eccentricity=1.5,
                           anomaly_at_epoch=0.0, periapsis_angle=0.0)
        arcs = list(conic_arcs(el, 0.0, BASIS, max_radius=10.0))
        for arc in arcs:
            assert np.all(np.linalg.norm(arc, axis=1) <= 10.0 + 1e-9)

    def test_occluding_body_splits_suborbital_path(self):
        """The part of a suborbital ellipse inside the body is dropped."""
        r = 1.2
        el = derive_conic_elements(r, 0.0, 0.8 * math.sqrt(GM * r), 0.0, GM)
        full = list(conic_arcs(el, 0.0, BASIS))
        occluded = list(conic_arcs(el, 0.0, BASIS, occlude_body=True))
        assert sum(len(a) for a in occluded) < sum(len(a) for a in full)
        for arc in occluded:
            assert np.all(np.linalg.norm(arc, axis=1) >= 1.0 - 1e-9)


# ── trajectory_arcs ───────────────────────────────────────────────

class TestTrajectoryArcs:

    def test_demo_satellite_traces_circle(self):
        sat = circular_satellite("s", "S", "red", 1.6, 0.0, 0.1, 0.1)
        arcs = list(trajectory_arcs(sat, BASIS, DEFAULT_CONFIG))
        assert len(arcs) == 1
        assert np.allclose(np.linalg.norm(arcs[0], axis=1), 1.6)

    def test_custom_without_angular_momentum_has_no_path(self):
        sat = custom_satellite("s", "S", "red", 1.6, 0.0, 0.0, DEFAULT_CONFIG)
        assert list(trajectory_arcs(sat, BASIS, DEFAULT_CONFIG)) == []

    def test_custom_circular_orbit(self):
        sat = custom_satellite(
            "s", "S", "red", 1.6, circular_rate(1.6, GM), 0.0, DEFAULT_CONFIG,
        )
        arcs = list(trajectory_arcs(sat, BASIS, DEFAULT_CONFIG, primary=True))
        assert len(arcs) == 1
        assert np.allclose(np.linalg.norm(arcs[0], axis=1), 1.6)

    def test_recomputed_every_call(self):
        sat = circular_satellite("s", "S", "red", 1.6, 0.0, 0.1, 0.0)
        first = next(trajectory_arcs(sat, BASIS, DEFAULT_CONFIG))
        sat.radius = 2.0
        second = next(trajectory_arcs(sat, BASIS, DEFAULT_CONFIG))
        assert np.linalg.norm(first[0]) == pytest.approx(1.6)
        assert np.linalg.norm(second[0]) == pytest.approx(2.0)
