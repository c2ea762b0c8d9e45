# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geodetic frame construction.

Turns a latitude/longitude pair on the unit sphere into an orthonormal
viewing basis: a forward axis through the geodetic point and two axes
spanning the local tangent plane. The same basis is used as the orbital
frame (anchored at the reference ground point) and as the projection
frame of every camera view.

No external dependencies — only stdlib math/dataclasses.

Known degeneracy: at the poles (cos(lat) = 0) the formulas stay well
defined, but tangent_u no longer depends on longitude in a meaningful
way. This is accepted and not reported as an error.
"""
import math
from dataclasses import dataclass

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class GeodeticBasis:
    """Orthonormal frame anchored at a geodetic point.

    forward:   unit vector from the sphere center through the point.
    tangent_u: east-pointing tangent, (sin lon, -cos lon, 0).
    tangent_v: meridional tangent, d(forward)/d(lat) negated.
    """
    forward: Vec3
    tangent_u: Vec3
    tangent_v: Vec3


def geodetic_basis(lat_deg: float, lon_deg: float) -> GeodeticBasis:
    """
    Build the orthonormal basis for a geodetic point.

        forward   = (clat·clon, clat·slon, slat)
        tangent_u = (slon, -clon, 0)
        tangent_v = (slat·clon, slat·slon, -clat)

    Args:
        lat_deg: Latitude in degrees.
        lon_deg: Longitude in degrees.

    Returns:
        GeodeticBasis with three mutually orthogonal unit vectors.
    """
    lat_rad = math.radians(lat_deg)
    lon_rad = math.radians(lon_deg)
    clat = math.cos(lat_rad)
    slat = math.sin(lat_rad)
    clon = math.cos(lon_rad)
    slon = math.sin(lon_rad)

    return GeodeticBasis(
        forward=(clat * clon, clat * slon, slat),
        tangent_u=(slon, -clon, 0.0),
        tangent_v=(slat * clon, slat * slon, -clat),
    )


def unit_vector_to_geodetic(vec: Vec3) -> tuple[float, float]:
    """
    Recover the geodetic point a unit vector passes through.

    Inverse of the forward axis of geodetic_basis. The z component is
    clamped to [-1, 1] so rounding noise cannot leave the asin domain.

    Args:
        vec: Unit vector (x, y, z).

    Returns:
        (lat_deg, lon_deg), latitude in [-90, 90], longitude in (-180, 180].
    """
    x, y, z = vec
    z = max(-1.0, min(1.0, z))
    lat_deg = math.degrees(math.asin(z))
    lon_deg = math.degrees(math.atan2(y, x))
    return lat_deg, lon_deg
