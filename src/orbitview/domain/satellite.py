# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Satellite orbital state.

Every satellite is stored in one internal representation,
(radius, radial_velocity, angular_momentum, anomaly); angular speed,
conic shape and periapsis location are derived from it.

Demo satellites follow fixed circular motion. Custom satellites follow
two-body radial dynamics and carry derived conic elements for path
rendering.

No external dependencies — only stdlib math/dataclasses/enum.
"""
import math
from dataclasses import dataclass, field
from enum import Enum

from orbitview.domain.config import SimulationConfig

TWO_PI = 2.0 * math.pi

SATELLITE_COLORS: tuple[str, ...] = (
    "red", "green", "blue", "yellow", "purple", "orange", "pink",
)

_DEMO_ALTITUDES_KM: tuple[float, ...] = (120.0, 150.0, 180.0, 210.0, 240.0)
_DEMO_BASE_SPEED = 0.1
_CUSTOM_START_ANOMALY = math.pi / 2


class OrbitPolicy(Enum):
    CIRCULAR = "circular"
    TWO_BODY = "two_body"


class OrbitStatus(Enum):
    ORBITING = "orbiting"
    CRASHED = "crashed"
    ESCAPED = "escaped"


@dataclass(frozen=True)
class ConicElements:
    """Conic section of a two-body orbit, derived from (r, vr, h)."""
    semi_latus_rectum: float
    eccentricity: float
    anomaly_at_epoch: float   # true anomaly f of the current position
    periapsis_angle: float    # in-plane angle of periapsis from the orbital center axis

    @property
    def is_bound(self) -> bool:
        return self.eccentricity < 1.0


@dataclass
class Satellite:
    """Mutable orbital state of one satellite, owned by the simulation."""
    sat_id: str
    name: str
    color: str
    radius: float
    anomaly: float
    radial_velocity: float
    angular_momentum: float
    speed_u: float
    speed_v: float
    plane_angle: float
    is_demo: bool
    status: OrbitStatus = OrbitStatus.ORBITING
    elements: ConicElements | None = field(default=None)

    @property
    def policy(self) -> OrbitPolicy:
        return OrbitPolicy.CIRCULAR if self.is_demo else OrbitPolicy.TWO_BODY

    @property
    def angular_speed(self) -> float:
        """Signed angular rate h / r² (rad/s); zero without transverse motion."""
        if self.angular_momentum == 0.0 or self.radius <= 0.0:
            return 0.0
        return self.angular_momentum / (self.radius * self.radius)


def altitude_km_to_radius(altitude_km: float, config: SimulationConfig) -> float:
    """Normalized radius for an altitude above the surface."""
    return config.body_radius + altitude_km / config.altitude_scale_km


def radius_to_altitude_km(radius: float, config: SimulationConfig) -> float:
    """Altitude above the surface for a normalized radius."""
    return (radius - config.body_radius) * config.altitude_scale_km


def circular_rate(radius: float, gm: float) -> float:
    """Angular rate of a circular orbit at the given radius: sqrt(GM / r³)."""
    return math.sqrt(gm / radius ** 3)


def derive_conic_elements(
    radius: float,
    radial_velocity: float,
    angular_momentum: float,
    anomaly: float,
    gm: float,
    circular_tolerance: float = 1e-6,
) -> ConicElements | None:
    """
    Derive conic orbit elements from the current two-body state.

        p = h² / GM
        A = h² / (GM·r) - 1        (= e·cos f)
        B = vr·h / GM              (= e·sin f)
        e = sqrt(A² + B²)
        f = atan2(B, A)
        periapsis_angle = anomaly - f

    Eccentricities below circular_tolerance are snapped to an exactly
    circular orbit with f = 0.

    Args:
        radius: Current radial distance r (> 0).
        radial_velocity: Current radial velocity vr.
        angular_momentum: Specific angular momentum h.
        anomaly: Current in-plane position angle.
        gm: Gravitational parameter.
        circular_tolerance: Eccentricity below which the orbit is circular.

    Returns:
        ConicElements, or None when h == 0 (radial fall, no conic).
    """
    if angular_momentum == 0.0 or radius <= 0.0:
        return None

    h2 = angular_momentum * angular_momentum
    p = h2 / gm
    a_term = h2 / (gm * radius) - 1.0
    b_term = radial_velocity * angular_momentum / gm
    e = math.hypot(a_term, b_term)

    if e < circular_tolerance:
        e = 0.0
        f = 0.0
    else:
        f = math.atan2(b_term, a_term)

    return ConicElements(
        semi_latus_rectum=p,
        eccentricity=e,
        anomaly_at_epoch=f,
        periapsis_angle=anomaly - f,
    )


def circular_satellite(
    sat_id: str,
    name: str,
    color: str,
    radius: float,
    anomaly: float,
    speed_u: float,
    speed_v: float,
) -> Satellite:
    """
    Create a demo satellite on a fixed circular path.

    The angular rate is the magnitude of the (speed_u, speed_v) components
    and the orbital plane is oriented at atan2(speed_v, speed_u) within the
    tangent plane of the orbital basis.
    """
    omega = math.hypot(speed_u, speed_v)
    return Satellite(
        sat_id=sat_id,
        name=name,
        color=color,
        radius=radius,
        anomaly=anomaly,
        radial_velocity=0.0,
        angular_momentum=omega * radius * radius,
        speed_u=speed_u,
        speed_v=speed_v,
        plane_angle=math.atan2(speed_v, speed_u),
        is_demo=True,
    )


def custom_satellite(
    sat_id: str,
    name: str,
    color: str,
    radius: float,
    speed_u: float,
    speed_v: float,
    config: SimulationConfig,
) -> Satellite:
    """
    Create a user-defined satellite following two-body dynamics.

    A negative speed_u flips both components and makes the orbit
    retrograde (negative angular momentum), so the plane orientation
    always lies in (-pi/2, pi/2]. The satellite starts at anomaly pi/2
    with zero radial velocity; h = ω₀·r₀² is conserved afterwards.
    """
    sign = 1.0
    if speed_u < 0:
        sign = -1.0
        speed_u = -speed_u
        speed_v = -speed_v
    omega = sign * math.hypot(speed_u, speed_v)

    sat = Satellite(
        sat_id=sat_id,
        name=name,
        color=color,
        radius=radius,
        anomaly=_CUSTOM_START_ANOMALY,
        radial_velocity=0.0,
        angular_momentum=omega * radius * radius,
        speed_u=speed_u,
        speed_v=speed_v,
        plane_angle=math.atan2(speed_v, speed_u),
        is_demo=False,
    )
    sat.elements = derive_conic_elements(
        sat.radius, sat.radial_velocity, sat.angular_momentum,
        sat.anomaly, config.gm, config.circular_tolerance,
    )
    return sat


def demo_satellites(config: SimulationConfig, first_id: int = 1) -> list[Satellite]:
    """
    Build the five demo satellites.

    Radii are 1 + {120, 150, 180, 210, 240} / 200, anomalies k·pi/5.
    Each gets speed_u = 0.1 and speed_v = sqrt(GM/r³) - 0.1.
    """
    satellites: list[Satellite] = []
    for k, altitude_km in enumerate(_DEMO_ALTITUDES_KM):
        r = altitude_km_to_radius(altitude_km, config)
        speed_u = _DEMO_BASE_SPEED
        speed_v = circular_rate(r, config.gm) - _DEMO_BASE_SPEED
        satellites.append(circular_satellite(
            sat_id=f"sat-{first_id + k}",
            name=f"Demo {k + 1}",
            color=SATELLITE_COLORS[k],
            radius=r,
            anomaly=k * math.pi / 5,
            speed_u=speed_u,
            speed_v=speed_v,
        ))
    return satellites
