# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Drawing surface that records commands instead of rasterizing.

Paths are stored as move-to/line-to sequences followed by a stroke, the
form a canvas-style host replays directly.
"""
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from orbitview.ports.rendering import RenderSurface


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing operation."""
    op: str
    x: float = 0.0
    y: float = 0.0
    color: str = ""
    size: float = 0.0
    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"op": self.op}
        if self.op in ("move_to", "line_to", "fill_circle", "text"):
            data["x"] = round(self.x, 3)
            data["y"] = round(self.y, 3)
        if self.color:
            data["color"] = self.color
        if self.op in ("stroke", "fill_circle"):
            data["size"] = self.size
        if self.text:
            data["text"] = self.text
        return data


class RecordingSurface(RenderSurface):
    """Collects drawing commands in order."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def clear(self) -> None:
        self.commands.clear()

    def draw_image(self, pixels: np.ndarray) -> None:
        height, width = np.asarray(pixels).shape[:2]
        self.commands.append(DrawCommand(op="image", x=float(width), y=float(height)))

    def stroke_path(
        self,
        segments: Sequence[np.ndarray],
        color: str,
        width: float,
    ) -> None:
        for segment in segments:
            for i, (x, y) in enumerate(segment):
                op = "move_to" if i == 0 else "line_to"
                self.commands.append(DrawCommand(op=op, x=float(x), y=float(y)))
        self.commands.append(DrawCommand(op="stroke", color=color, size=width))

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self.commands.append(DrawCommand(
            op="fill_circle", x=x, y=y, color=color, size=radius,
        ))

    def draw_text(self, x: float, y: float, text: str, color: str) -> None:
        self.commands.append(DrawCommand(op="text", x=x, y=y, color=color, text=text))

    def of_kind(self, op: str) -> list[DrawCommand]:
        return [c for c in self.commands if c.op == op]

    def to_dicts(self) -> list[dict[str, Any]]:
        return [c.to_dict() for c in self.commands]
