# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for textures, drawing surfaces, clocks, location and JSON I/O.

External dependencies (Pillow, json, file I/O, system time) are confined
to this layer.
"""
from orbitview.adapters.clocks import (
    FixedWallClock,
    SteppedFrameClock,
    SystemWallClock,
)
from orbitview.adapters.json_io import JsonConfigReader, JsonSnapshotWriter
from orbitview.adapters.location import FixedLocation
from orbitview.adapters.pillow_surface import PillowSurface
from orbitview.adapters.pillow_texture import ImageTexture, load_texture
from orbitview.adapters.recording_surface import DrawCommand, RecordingSurface

__all__ = [
    "DrawCommand",
    "FixedLocation",
    "FixedWallClock",
    "ImageTexture",
    "JsonConfigReader",
    "JsonSnapshotWriter",
    "PillowSurface",
    "RecordingSurface",
    "SteppedFrameClock",
    "SystemWallClock",
    "load_texture",
]
