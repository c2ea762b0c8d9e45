# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for JSON config reading and snapshot export."""
import json
from datetime import datetime, timedelta, timezone

import pytest

from orbitview.adapters.json_io import (
    JsonConfigReader,
    JsonSnapshotWriter,
    schedule_config_from_dict,
    simulation_config_from_dict,
    snapshot_to_dict,
)
from orbitview.domain.config import DEFAULT_CONFIG, DEFAULT_SCHEDULE
from orbitview.domain.simulation import Simulation
from orbitview.ports import ConfigReader

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


# ── Helpers ───────────────────────────────────────────────────────

def _write(tmp_path, data, name="cfg.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


# ── JsonConfigReader ──────────────────────────────────────────────

class TestJsonConfigReader:

    def test_implements_port(self):
        assert isinstance(JsonConfigReader(), ConfigReader)

    def test_empty_object_gives_defaults(self, tmp_path):
        sim, sched = JsonConfigReader().read_config(_write(tmp_path, {}))
        assert sim == DEFAULT_CONFIG
        assert sched == DEFAULT_SCHEDULE

    def test_overrides(self, tmp_path):
        path = _write(tmp_path, {
            "simulation": {"escape_radius": 30, "radial_damping": 0.5},
            "schedule": {"interval_count": 5, "padding_s": 600, "dedup_tolerance_s": 2},
        })
        sim, sched = JsonConfigReader().read_config(path)
        assert sim.escape_radius == 30.0
        assert sim.radial_damping == 0.5
        assert sched.interval_count == 5
        assert sched.padding == timedelta(minutes=10)
        assert sched.dedup_tolerance == timedelta(seconds=2)

    def test_unknown_section(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown keys in 'config'"):
            JsonConfigReader().read_config(_write(tmp_path, {"render": {}}))

    def test_unknown_simulation_key(self, tmp_path):
        with pytest.raises(ValueError, match="gravity"):
            JsonConfigReader().read_config(_write(tmp_path, {"simulation": {"gravity": 1}}))

    def test_padding_needs_seconds_suffix(self):
        with pytest.raises(ValueError, match="padding"):
            schedule_config_from_dict({"padding": 60})

    def test_invalid_value_rejected(self):
        with pytest.raises(ValueError):
            simulation_config_from_dict({"gm": -1})

    def test_null_value_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid value for 'gm'"):
            JsonConfigReader().read_config(_write(tmp_path, {"simulation": {"gm": None}}))

    def test_non_numeric_value_rejected(self):
        with pytest.raises(ValueError, match="padding_s"):
            schedule_config_from_dict({"padding_s": "soon"})

    def test_section_must_be_object(self, tmp_path):
        with pytest.raises(ValueError, match="'schedule' must be an object"):
            JsonConfigReader().read_config(_write(tmp_path, {"schedule": [1, 2]}))

    def test_fractional_count_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="interval_count"):
            JsonConfigReader().read_config(
                _write(tmp_path, {"schedule": {"interval_count": 2.7}})
            )

    def test_integral_float_count_accepted(self):
        assert schedule_config_from_dict({"interval_count": 4.0}).interval_count == 4

    def test_root_must_be_object(self, tmp_path):
        with pytest.raises(ValueError):
            JsonConfigReader().read_config(_write(tmp_path, [1, 2]))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonConfigReader().read_config(str(tmp_path / "nope.json"))


# ── Snapshot export ───────────────────────────────────────────────

class TestSnapshotExport:

    def test_snapshot_to_dict(self):
        sim = Simulation.with_demo_satellites(52.0, 5.0)
        data = snapshot_to_dict(sim.snapshot(), sim.config)
        assert len(data['satellites']) == 5
        first = data['satellites'][0]
        assert first['index'] == 1
        assert first['id'] == "sat-1"
        assert first['altitude_km'] == pytest.approx(120.0)
        assert first['status'] == "orbiting"
        assert first['demo'] is True
        assert 'eccentricity' not in first
        assert data['free_intervals'] == []

    def test_custom_satellite_has_elements(self):
        from orbitview.domain.requests import AddSatelliteRequest

        sim = Simulation(0.0, 0.0)
        sim.add_satellite(AddSatelliteRequest(100.0, 0.2, 0.0))
        data = snapshot_to_dict(sim.snapshot(), sim.config)
        assert 'eccentricity' in data['satellites'][0]

    def test_writer_round_trip(self, tmp_path):
        sim = Simulation.with_demo_satellites(52.0, 5.0)
        intervals = sim.free_intervals(T0)
        path = str(tmp_path / "state.json")
        count = JsonSnapshotWriter().write_snapshot(
            sim.snapshot(), sim.config, path, intervals=intervals, generated_at=T0,
        )
        assert count == 5
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data['generated_at'] == T0.isoformat()
        assert len(data['free_intervals']) == 3
        assert data['free_intervals'][0]['start'] == intervals[0].start.isoformat()
        assert data['free_intervals'][0]['duration'] == intervals[0].duration_text
        assert data['orbital_basis']['center'] == pytest.approx(list(sim.orbital_basis.forward))
