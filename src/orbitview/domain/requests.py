# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Structured satellite add/delete commands.

User input arrives as raw strings; the parse_* functions validate it and
produce immutable requests. Anything malformed raises
InputValidationError with a message suitable for showing to the user,
before the simulation is touched.
"""
import math
from dataclasses import dataclass
from enum import Enum

from orbitview.domain.errors import InputValidationError


class OrbitType(Enum):
    """Named launch profiles, as multiples of the local circular rate."""
    CIRCULAR = "circular"
    ELLIPTICAL = "elliptical"
    ESCAPE = "escape"
    SUBORBITAL = "suborbital"

    @property
    def rate_factor(self) -> float:
        return _RATE_FACTORS[self]


# ESCAPE is above sqrt(2): h²/(GM·r) - 1 = 1.25 gives e > 1.
_RATE_FACTORS: dict[OrbitType, float] = {
    OrbitType.CIRCULAR: 1.0,
    OrbitType.ELLIPTICAL: 1.2,
    OrbitType.ESCAPE: 1.5,
    OrbitType.SUBORBITAL: 0.8,
}


@dataclass(frozen=True)
class AddSatelliteRequest:
    """Add a custom satellite from explicit rate components."""
    altitude_km: float
    speed_u: float
    speed_v: float
    name: str | None = None

    def __post_init__(self) -> None:
        _require_finite("speedU", self.speed_u)
        _require_finite("speedV", self.speed_v)
        _require_altitude(self.altitude_km)


@dataclass(frozen=True)
class OrbitTypeRequest:
    """Add a custom satellite from a named orbit profile."""
    orbit_type: OrbitType
    altitude_km: float
    name: str | None = None
    plane_angle_deg: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.orbit_type, OrbitType):
            raise InputValidationError(f"Unknown orbit type: {self.orbit_type!r}")
        _require_altitude(self.altitude_km)
        _require_finite("plane angle", self.plane_angle_deg)


def _require_finite(label: str, value: float) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InputValidationError(f"Invalid {label}. Please enter a number.")


def _require_altitude(value: float) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        raise InputValidationError(
            "Invalid altitude. Please enter a non-negative number."
        )


def _parse_number(label: str, text: str) -> float:
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise InputValidationError(f"Invalid {label}. Please enter a number.") from None
    if not math.isfinite(value):
        raise InputValidationError(f"Invalid {label}. Please enter a number.")
    return value


def _clean_name(name: str | None) -> str | None:
    if name is None:
        return None
    name = name.strip()
    return name or None


def parse_add_request(
    speed_u_text: str,
    speed_v_text: str,
    altitude_text: str,
    name: str | None = None,
) -> AddSatelliteRequest:
    """
    Validate raw add-satellite input.

    Args:
        speed_u_text: U-component of the angular rate (rad/s).
        speed_v_text: V-component of the angular rate (rad/s).
        altitude_text: Altitude above the surface (km, >= 0).
        name: Optional display name.

    Raises:
        InputValidationError: On any non-numeric or negative value.
    """
    speed_u = _parse_number("speedU", speed_u_text)
    speed_v = _parse_number("speedV", speed_v_text)
    try:
        altitude = float(altitude_text)
    except (TypeError, ValueError):
        altitude = math.nan
    return AddSatelliteRequest(
        altitude_km=altitude,
        speed_u=speed_u,
        speed_v=speed_v,
        name=_clean_name(name),
    )


def parse_orbit_type_request(
    orbit_type_text: str,
    altitude_text: str,
    name: str | None = None,
) -> OrbitTypeRequest:
    """
    Validate raw orbit-profile input.

    Raises:
        InputValidationError: On an unknown profile or a bad altitude.
    """
    key = (orbit_type_text or "").strip().lower()
    try:
        orbit_type = OrbitType(key)
    except ValueError:
        choices = ", ".join(t.value for t in OrbitType)
        raise InputValidationError(
            f"Invalid orbit type '{orbit_type_text}'. Choose one of: {choices}."
        ) from None
    try:
        altitude = float(altitude_text)
    except (TypeError, ValueError):
        altitude = math.nan
    return OrbitTypeRequest(
        orbit_type=orbit_type,
        altitude_km=altitude,
        name=_clean_name(name),
    )


def parse_delete_index(index_text: str, count: int) -> int:
    """
    Validate a 1-based satellite index.

    Args:
        index_text: Raw index as typed by the user.
        count: Current number of satellites.

    Returns:
        The 0-based list position.

    Raises:
        InputValidationError: If the index is not an integer in [1, count].
    """
    try:
        index = int(str(index_text).strip())
    except ValueError:
        index = 0
    if index < 1 or index > count:
        raise InputValidationError(
            "Invalid index. Please enter a valid satellite index."
        )
    return index - 1
