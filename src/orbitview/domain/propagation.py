# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit propagation with explicit Euler stepping.

Two update policies:
    CIRCULAR  — anomaly advances at the fixed creation rate.
    TWO_BODY  — angular momentum h is conserved; the radial equation

        a_r = (h²/r³ - GM/r²) · damping
        vr += a_r·dt
        r  += vr·dt
        anomaly += (h/r²)·dt

    is integrated and the conic elements are re-derived every tick.

Termination: r <= body radius is a crash, r > escape radius an escape.
Terminal satellites are removed within the same propagate() call that
detected them, before any reader sees the list again.
"""
import logging
from dataclasses import dataclass

from orbitview.domain.config import SimulationConfig
from orbitview.domain.satellite import (
    OrbitStatus,
    Satellite,
    derive_conic_elements,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalEvent:
    """A satellite left the simulation (crash or escape)."""
    sat_id: str
    name: str
    status: OrbitStatus
    radius: float


def radial_acceleration(
    radius: float,
    angular_momentum: float,
    config: SimulationConfig,
) -> float:
    """Damped two-body radial acceleration (h²/r³ - GM/r²)·damping."""
    centrifugal = angular_momentum * angular_momentum / radius ** 3
    gravity = config.gm / (radius * radius)
    return (centrifugal - gravity) * config.radial_damping


def classify_radius(radius: float, config: SimulationConfig) -> OrbitStatus:
    """Map a radial distance onto the orbit status state machine."""
    if radius <= config.body_radius:
        return OrbitStatus.CRASHED
    if radius > config.escape_radius:
        return OrbitStatus.ESCAPED
    return OrbitStatus.ORBITING


def advance_satellite(
    sat: Satellite,
    dt: float,
    config: SimulationConfig,
) -> OrbitStatus:
    """
    Advance one satellite by dt seconds and update its status.

    A satellite with h == 0 has no transverse motion: only the radial
    update runs, so it falls until it crashes. No division by h occurs.

    Args:
        sat: Satellite to mutate in place.
        dt: Time step in seconds (>= 0).
        config: Simulation parameters.

    Returns:
        The satellite's status after the step.

    Raises:
        ValueError: If dt is negative.
    """
    if dt < 0:
        raise ValueError(f"Time step must be non-negative, got {dt}")
    if sat.status is not OrbitStatus.ORBITING:
        return sat.status

    if sat.is_demo:
        sat.anomaly += sat.angular_speed * dt
    else:
        h = sat.angular_momentum
        accel_r = radial_acceleration(sat.radius, h, config)
        sat.radial_velocity += accel_r * dt
        sat.radius += sat.radial_velocity * dt
        if h != 0.0 and sat.radius > 0.0:
            sat.anomaly += h / (sat.radius * sat.radius) * dt
        sat.elements = derive_conic_elements(
            sat.radius, sat.radial_velocity, h, sat.anomaly,
            config.gm, config.circular_tolerance,
        )
        logger.debug(
            "Satellite %s update: r=%.3f, vr=%.3f, accel_r=%.3f, anomaly=%.3f",
            sat.name, sat.radius, sat.radial_velocity, accel_r, sat.anomaly,
        )

    sat.status = classify_radius(sat.radius, config)
    return sat.status


def propagate(
    satellites: list[Satellite],
    dt: float,
    config: SimulationConfig,
) -> list[TerminalEvent]:
    """
    Advance all satellites by dt and remove terminal ones in place.

    Args:
        satellites: Satellite list, mutated in place.
        dt: Time step in seconds (>= 0).
        config: Simulation parameters.

    Returns:
        Terminal events for the satellites removed during this step,
        in list order.
    """
    if dt < 0:
        raise ValueError(f"Time step must be non-negative, got {dt}")

    events: list[TerminalEvent] = []
    survivors: list[Satellite] = []

    for sat in satellites:
        status = advance_satellite(sat, dt, config)
        if status is OrbitStatus.ORBITING:
            survivors.append(sat)
            continue
        events.append(TerminalEvent(
            sat_id=sat.sat_id,
            name=sat.name,
            status=status,
            radius=sat.radius,
        ))
        logger.info(
            "Satellite %s (%s) %s at r=%.3f, removed",
            sat.name, sat.color, status.value, sat.radius,
        )

    satellites[:] = survivors
    return events
