# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Raster drawing surface backed by a Pillow image.
"""
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from orbitview.ports.rendering import RenderSurface

_TEXT_HEIGHT = 11


class PillowSurface(RenderSurface):
    """Rasterizes drawing commands onto an RGB image."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), "black")
        self._draw = ImageDraw.Draw(self.image)
        self._font = ImageFont.load_default()

    def draw_image(self, pixels: np.ndarray) -> None:
        background = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
        if background.size != self.image.size:
            raise ValueError(
                f"Background is {background.size}, surface is {self.image.size}"
            )
        self.image.paste(background)

    def stroke_path(
        self,
        segments: Sequence[np.ndarray],
        color: str,
        width: float,
    ) -> None:
        line_width = max(1, int(round(width)))
        for segment in segments:
            points = [(float(x), float(y)) for x, y in segment]
            if len(points) >= 2:
                self._draw.line(points, fill=color, width=line_width)

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self._draw.ellipse(
            (x - radius, y - radius, x + radius, y + radius), fill=color,
        )

    def draw_text(self, x: float, y: float, text: str, color: str) -> None:
        self._draw.text((x, y - _TEXT_HEIGHT), text, fill=color, font=self._font)

    def to_array(self) -> np.ndarray:
        return np.asarray(self.image)

    def save(self, path: str) -> None:
        self.image.save(path)
