# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Globe texture lookup for an orthographic view.

For every pixel inside the globe's disc the visible surface point is
reconstructed from the view basis,

    (x, y) in the unit disc, z = sqrt(1 - x² - y²)
    p = U·x + V·y + C·z

and mapped to equirectangular texture coordinates

    u = (0.5 - atan2(p_y, p_x) / 2pi + 0.425) mod 1
    v = asin(p_z) / pi + 0.5

The 0.425 offset aligns the prime meridian of the usual daymap textures.
Pixel rows use the same y-flip as projection.to_screen, so trajectories
drawn over the globe line up with it. The orbital V axis points south,
so globes render south-up (the top pixel of a view at lat 0, lon 0 is
(0, 0, -1)); this orientation is shared by every view. Decoding and
sampling the image are left to the TextureSampler port.
"""
import math

import numpy as np

from orbitview.domain.geodetic_frame import GeodeticBasis
from orbitview.ports.rendering import TextureSampler

_MERIDIAN_OFFSET = 0.5 - 0.075
_CENTER_MARK_HALF_WIDTH = 0.02
_CENTER_MARK_COLOR = (255, 0, 0)


def _disc_coordinates(
    width: int,
    height: int,
    earth_radius_px: float,
) -> tuple[np.ndarray, np.ndarray]:
    rows, cols = np.mgrid[0:height, 0:width]
    x = (cols - width / 2.0) / earth_radius_px
    y = (height / 2.0 - rows) / earth_radius_px
    return x, y


def globe_texture_coordinates(
    basis: GeodeticBasis,
    width: int,
    height: int,
    earth_radius_px: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Texture coordinates of every pixel of a globe view.

    Args:
        basis: View basis (camera looks along -forward at the globe).
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        earth_radius_px: Globe radius in pixels.

    Returns:
        (u, v, inside) arrays of shape (height, width); u and v are only
        meaningful where inside is True.
    """
    x, y = _disc_coordinates(width, height, earth_radius_px)
    r2 = x * x + y * y
    inside = r2 <= 1.0
    z = np.sqrt(np.maximum(0.0, 1.0 - r2))

    u_axis = np.asarray(basis.tangent_u)
    v_axis = np.asarray(basis.tangent_v)
    c_axis = np.asarray(basis.forward)
    px = u_axis[0] * x + v_axis[0] * y + c_axis[0] * z
    py = u_axis[1] * x + v_axis[1] * y + c_axis[1] * z
    pz = u_axis[2] * x + v_axis[2] * y + c_axis[2] * z

    tex_u = np.mod(0.5 - np.arctan2(py, px) / (2.0 * math.pi) + _MERIDIAN_OFFSET, 1.0)
    tex_v = np.arcsin(np.clip(pz, -1.0, 1.0)) / math.pi + 0.5
    return tex_u, tex_v, inside


def render_globe(
    basis: GeodeticBasis,
    width: int,
    height: int,
    earth_radius_px: float,
    texture: TextureSampler,
    mark_center: bool = False,
) -> np.ndarray:
    """
    Render the textured globe on a black background.

    Args:
        basis: View basis.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        earth_radius_px: Globe radius in pixels.
        texture: Texture sampling capability.
        mark_center: Paint a small red square at the view center.

    Returns:
        uint8 image of shape (height, width, 3).
    """
    u, v, inside = globe_texture_coordinates(basis, width, height, earth_radius_px)
    image = np.zeros((height, width, 3), dtype=np.uint8)
    if inside.any():
        image[inside] = texture.sample(u[inside], v[inside])

    if mark_center:
        x, y = _disc_coordinates(width, height, earth_radius_px)
        mark = (
            inside
            & (np.abs(x) < _CENTER_MARK_HALF_WIDTH)
            & (np.abs(y) < _CENTER_MARK_HALF_WIDTH)
        )
        image[mark] = _CENTER_MARK_COLOR

    return image
