# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Camera views.

Three cameras look at the globe: the main view centred on the reference
point, and two auxiliary views centred on the geodetic points that the
orbital tangent axes U and V pass through.
"""
from dataclasses import dataclass
from enum import Enum

from orbitview.domain.geodetic_frame import (
    GeodeticBasis,
    geodetic_basis,
    unit_vector_to_geodetic,
)


class ViewMode(Enum):
    NET = "net"
    U = "U"
    V = "V"


@dataclass(frozen=True)
class ViewConfig:
    """One rendered camera: its projection basis and canvas geometry."""
    name: str
    mode: ViewMode
    center_lat_deg: float
    center_lon_deg: float
    basis: GeodeticBasis
    width: int
    height: int
    earth_radius_px: float
    primary: bool = False

    @property
    def center_px(self) -> tuple[float, float]:
        return self.width / 2.0, self.height / 2.0


def make_view(
    name: str,
    mode: ViewMode,
    lat_deg: float,
    lon_deg: float,
    width: int,
    height: int,
    earth_radius_px: float,
    primary: bool = False,
) -> ViewConfig:
    """Build a view whose projection basis is anchored at (lat, lon)."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")
    if earth_radius_px <= 0:
        raise ValueError(f"earth_radius_px must be positive, got {earth_radius_px}")
    return ViewConfig(
        name=name,
        mode=mode,
        center_lat_deg=lat_deg,
        center_lon_deg=lon_deg,
        basis=geodetic_basis(lat_deg, lon_deg),
        width=width,
        height=height,
        earth_radius_px=earth_radius_px,
        primary=primary,
    )


def build_views(
    lat_deg: float,
    lon_deg: float,
    orbital_basis: GeodeticBasis,
    main_size: int = 600,
    aux_size: int = 200,
) -> list[ViewConfig]:
    """
    Build the main view and the two auxiliary views.

    The earth fills each canvas: radius is half the canvas size.

    Args:
        lat_deg: Reference latitude (main view center).
        lon_deg: Reference longitude (main view center).
        orbital_basis: Orbital basis of the reference point.
        main_size: Main canvas edge in pixels.
        aux_size: Auxiliary canvas edge in pixels.

    Returns:
        [main, U-view, V-view].
    """
    u_lat, u_lon = unit_vector_to_geodetic(orbital_basis.tangent_u)
    v_lat, v_lon = unit_vector_to_geodetic(orbital_basis.tangent_v)
    return [
        make_view("main", ViewMode.NET, lat_deg, lon_deg,
                  main_size, main_size, main_size / 2.0, primary=True),
        make_view("second", ViewMode.U, u_lat, u_lon,
                  aux_size, aux_size, aux_size / 2.0),
        make_view("third", ViewMode.V, v_lat, v_lon,
                  aux_size, aux_size, aux_size / 2.0),
    ]
