# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON configuration reader and snapshot writer.

Config files hold two optional sections:

    {
        "simulation": {"gm": 0.137, "escape_radius": 50.0, ...},
        "schedule": {"interval_count": 3, "padding_s": 3600, ...}
    }

Schedule durations are given in seconds with an ``_s`` suffix.
External dependencies (json, file I/O) are confined to this adapter.
"""
import json
from dataclasses import fields
from datetime import datetime, timedelta
from typing import Any

from orbitview.domain.config import ScheduleConfig, SimulationConfig
from orbitview.domain.overflight import FreeInterval
from orbitview.domain.satellite import radius_to_altitude_km
from orbitview.domain.simulation import SimulationSnapshot
from orbitview.ports import ConfigReader

_SECTIONS = ("simulation", "schedule")
_DURATION_FIELDS = {"dedup_tolerance": "dedup_tolerance_s", "padding": "padding_s"}


def _check_section(section: str, data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"Section '{section}' must be an object, got {type(data).__name__}")
    return data


def _check_keys(section: str, data: dict[str, Any], allowed: set[str]) -> None:
    unknown = sorted(map(str, set(data) - allowed))
    if unknown:
        raise ValueError(f"Unknown keys in '{section}': {', '.join(unknown)}")


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Invalid value for '{key}': {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value for '{key}': {value!r}") from None


def _as_int(key: str, value: Any) -> int:
    number = _as_float(key, value)
    if not number.is_integer():
        raise ValueError(f"'{key}' must be a whole number, got {value!r}")
    return int(number)


def simulation_config_from_dict(data: dict[str, Any]) -> SimulationConfig:
    """Build a SimulationConfig, rejecting unknown keys and non-numeric values."""
    data = _check_section("simulation", data)
    _check_keys("simulation", data, {f.name for f in fields(SimulationConfig)})
    return SimulationConfig(**{k: _as_float(k, v) for k, v in data.items()})


def schedule_config_from_dict(data: dict[str, Any]) -> ScheduleConfig:
    """Build a ScheduleConfig, rejecting unknown keys and fractional counts."""
    data = _check_section("schedule", data)
    allowed = {
        _DURATION_FIELDS.get(f.name, f.name) for f in fields(ScheduleConfig)
    }
    _check_keys("schedule", data, allowed)
    kwargs: dict[str, Any] = {}
    for name, key in _DURATION_FIELDS.items():
        if key in data:
            kwargs[name] = timedelta(seconds=_as_float(key, data[key]))
    for key in ("crossings_per_satellite", "interval_count"):
        if key in data:
            kwargs[key] = _as_int(key, data[key])
    if "min_angular_rate" in data:
        kwargs["min_angular_rate"] = _as_float("min_angular_rate", data["min_angular_rate"])
    return ScheduleConfig(**kwargs)


class JsonConfigReader(ConfigReader):
    """Reads simulation and schedule configuration from JSON files."""

    def read_config(self, path: str) -> tuple[SimulationConfig, ScheduleConfig]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be an object, got {type(data).__name__}")
        _check_keys("config", data, set(_SECTIONS))
        return (
            simulation_config_from_dict(data.get("simulation", {})),
            schedule_config_from_dict(data.get("schedule", {})),
        )


def snapshot_to_dict(
    snapshot: SimulationSnapshot,
    config: SimulationConfig,
    intervals: list[FreeInterval] | None = None,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """JSON-ready view of a snapshot and its free intervals."""
    satellites = []
    for index, sat in enumerate(snapshot.satellites, start=1):
        entry: dict[str, Any] = {
            'index': index,
            'id': sat.sat_id,
            'name': sat.name,
            'color': sat.color,
            'demo': sat.is_demo,
            'radius': round(sat.radius, 6),
            'altitude_km': round(radius_to_altitude_km(sat.radius, config), 3),
            'anomaly_rad': round(sat.anomaly, 6),
            'speed_u': round(sat.speed_u, 6),
            'speed_v': round(sat.speed_v, 6),
            'angular_speed': round(sat.angular_speed, 6),
            'plane_angle_rad': round(sat.plane_angle, 6),
            'status': sat.status.value,
        }
        if sat.elements is not None:
            entry['eccentricity'] = round(sat.elements.eccentricity, 6)
            entry['semi_latus_rectum'] = round(sat.elements.semi_latus_rectum, 6)
        satellites.append(entry)

    basis = snapshot.orbital_basis
    data: dict[str, Any] = {
        'elapsed_s': round(snapshot.elapsed_s, 6),
        'tick_count': snapshot.tick_count,
        'orbital_basis': {
            'center': list(basis.forward),
            'u': list(basis.tangent_u),
            'v': list(basis.tangent_v),
        },
        'satellites': satellites,
        'free_intervals': [
            {
                'start': interval.start.isoformat(),
                'end': interval.end.isoformat(),
                'duration': interval.duration_text,
            }
            for interval in intervals or []
        ],
    }
    if generated_at is not None:
        data['generated_at'] = generated_at.isoformat()
    return data


class JsonSnapshotWriter:
    """Writes simulation snapshots to JSON files."""

    def write_snapshot(
        self,
        snapshot: SimulationSnapshot,
        config: SimulationConfig,
        path: str,
        intervals: list[FreeInterval] | None = None,
        generated_at: datetime | None = None,
    ) -> int:
        data = snapshot_to_dict(snapshot, config, intervals, generated_at)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return len(snapshot.satellites)
