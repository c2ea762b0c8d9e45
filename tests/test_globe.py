# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for globe texture coordinates and rasterization."""
import ast

import numpy as np
import pytest

from orbitview.domain.geodetic_frame import geodetic_basis
from orbitview.domain.globe import globe_texture_coordinates, render_globe
from orbitview.domain.projection import project_points, to_screen


# ── Helpers ───────────────────────────────────────────────────────

class _UTexture:
    """Encodes u in the red channel and v in the green channel."""

    def sample(self, u, v):
        out = np.zeros((len(u), 3), dtype=np.uint8)
        out[:, 0] = np.clip(u * 255, 0, 255).astype(np.uint8)
        out[:, 1] = np.clip(v * 255, 0, 255).astype(np.uint8)
        out[:, 2] = 255
        return out


# ── globe_texture_coordinates ─────────────────────────────────────

class TestGlobeTextureCoordinates:

    def test_disc_mask(self):
        _, _, inside = globe_texture_coordinates(geodetic_basis(0.0, 0.0), 100, 100, 50.0)
        assert inside[50, 50]
        assert not inside[0, 0]
        assert not inside[99, 99]

    def test_center_maps_to_view_longitude(self):
        """At lon 0 the center pixel sits at u = 0.925 and v = 0.5."""
        u, v, _ = globe_texture_coordinates(geodetic_basis(0.0, 0.0), 101, 101, 50.0)
        assert u[50, 50] == pytest.approx(0.925, abs=0.01)
        assert v[50, 50] == pytest.approx(0.5, abs=0.01)

    def test_aligned_with_projection(self):
        """The pixel a surface point projects to samples that point's latitude."""
        basis = geodetic_basis(0.0, 0.0)
        point = np.array([np.cos(np.radians(10.0)), 0.0, np.sin(np.radians(10.0))])
        projected = project_points(point, basis)
        sx, sy = to_screen(projected.x[0], projected.y[0], (100.5, 100.5), 100.0)
        _, v, inside = globe_texture_coordinates(basis, 201, 201, 100.0)
        row, col = int(sy), int(sx)
        assert inside[row, col]
        assert v[row, col] == pytest.approx(10.0 / 180.0 + 0.5, abs=0.01)

    def test_ranges(self):
        u, v, inside = globe_texture_coordinates(geodetic_basis(40.0, -70.0), 64, 48, 20.0)
        assert u.shape == (48, 64)
        assert np.all((u[inside] >= 0) & (u[inside] < 1))
        assert np.all((v[inside] >= 0) & (v[inside] <= 1))


# ── render_globe ──────────────────────────────────────────────────

class TestRenderGlobe:

    def test_outside_disc_black(self):
        img = render_globe(geodetic_basis(0.0, 0.0), 80, 80, 30.0, _UTexture())
        assert img.shape == (80, 80, 3)
        assert img.dtype == np.uint8
        assert img[0, 0].tolist() == [0, 0, 0]
        assert img[40, 40, 2] == 255

    def test_center_mark(self):
        img = render_globe(geodetic_basis(0.0, 0.0), 200, 200, 100.0, _UTexture(), mark_center=True)
        assert img[100, 100].tolist() == [255, 0, 0]
        assert img[100, 110, 2] == 255

    def test_no_mark_by_default(self):
        img = render_globe(geodetic_basis(0.0, 0.0), 200, 200, 100.0, _UTexture())
        assert img[100, 100, 2] == 255


# ── Domain purity ─────────────────────────────────────────────────

class TestGlobePurity:

    def test_module_pure(self):
        """globe.py may only use math and numpy."""
        import orbitview.domain.globe as mod

        allowed = {'math', 'numpy', 'dataclasses', 'typing'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    assert alias.name.split('.')[0] in allowed
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    assert root in allowed or root == 'orbitview'
