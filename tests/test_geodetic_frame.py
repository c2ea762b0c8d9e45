# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for geodetic basis construction."""
import ast
import math

import pytest

from orbitview.domain.geodetic_frame import (
    GeodeticBasis,
    geodetic_basis,
    unit_vector_to_geodetic,
)


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _norm(a):
    return math.sqrt(_dot(a, a))


# ── geodetic_basis ────────────────────────────────────────────────

class TestGeodeticBasis:

    @pytest.mark.parametrize("lat,lon", [
        (0.0, 0.0), (52.37, 4.9), (-33.9, 151.2), (89.9, -120.0),
        (90.0, 0.0), (-90.0, 45.0), (12.5, 179.9), (-45.0, -180.0),
    ])
    def test_orthonormal(self, lat, lon):
        """All three axes are unit length and pairwise orthogonal."""
        b = geodetic_basis(lat, lon)
        for axis in (b.forward, b.tangent_u, b.tangent_v):
            assert _norm(axis) == pytest.approx(1.0, abs=1e-9)
        assert abs(_dot(b.forward, b.tangent_u)) < 1e-9
        assert abs(_dot(b.forward, b.tangent_v)) < 1e-9
        assert abs(_dot(b.tangent_u, b.tangent_v)) < 1e-9

    def test_origin(self):
        """(0, 0) looks along +x with U = -y and V = -z."""
        b = geodetic_basis(0.0, 0.0)
        assert b.forward == pytest.approx((1.0, 0.0, 0.0))
        assert b.tangent_u == pytest.approx((0.0, -1.0, 0.0))
        assert b.tangent_v == pytest.approx((0.0, 0.0, -1.0))

    def test_north_pole(self):
        """At the pole forward is +z and the formulas stay finite."""
        b = geodetic_basis(90.0, 30.0)
        assert b.forward == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)
        assert all(math.isfinite(c) for c in b.tangent_u + b.tangent_v)

    def test_tangent_u_has_no_z(self):
        b = geodetic_basis(41.0, -73.0)
        assert b.tangent_u[2] == 0.0

    def test_frozen(self):
        """GeodeticBasis is immutable."""
        b = geodetic_basis(10.0, 20.0)
        with pytest.raises(AttributeError):
            b.forward = (0.0, 0.0, 1.0)

    def test_returns_geodetic_basis(self):
        assert isinstance(geodetic_basis(1.0, 2.0), GeodeticBasis)


# ── unit_vector_to_geodetic ───────────────────────────────────────

class TestUnitVectorToGeodetic:

    @pytest.mark.parametrize("lat,lon", [
        (0.0, 0.0), (52.37, 4.9), (-33.9, 151.2), (-60.0, -100.0),
    ])
    def test_inverts_forward_axis(self, lat, lon):
        """The forward axis maps back to its own geodetic point."""
        b = geodetic_basis(lat, lon)
        got_lat, got_lon = unit_vector_to_geodetic(b.forward)
        assert got_lat == pytest.approx(lat, abs=1e-9)
        assert got_lon == pytest.approx(lon, abs=1e-9)

    def test_clamps_rounding_noise(self):
        """z slightly above 1 does not leave the asin domain."""
        lat, _ = unit_vector_to_geodetic((0.0, 0.0, 1.0 + 1e-12))
        assert lat == pytest.approx(90.0)

    def test_tangent_u_is_on_equator(self):
        """U has no z component, so its geodetic point is on the equator."""
        b = geodetic_basis(52.0, 5.0)
        lat, lon = unit_vector_to_geodetic(b.tangent_u)
        assert lat == pytest.approx(0.0, abs=1e-12)
        assert lon == pytest.approx(5.0 - 90.0)


# ── Domain purity ─────────────────────────────────────────────────

class TestGeodeticFramePurity:

    def test_module_pure(self):
        """geodetic_frame.py must only import stdlib modules."""
        import orbitview.domain.geodetic_frame as mod

        allowed = {'math', 'dataclasses', 'typing'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    assert root in allowed, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    assert root in allowed or root == 'orbitview', (
                        f"Disallowed import from '{node.module}'"
                    )
