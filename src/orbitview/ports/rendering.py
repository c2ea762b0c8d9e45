# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for texture sampling and drawing.

The domain computes texture coordinates and screen-space geometry;
adapters decode images and rasterize.
"""
from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class TextureSampler(Protocol):
    """Port for sampling an equirectangular globe texture."""

    def sample(self, u: np.ndarray, v: np.ndarray) -> np.ndarray:
        """
        Sample colors at normalized texture coordinates.

        Args:
            u: Horizontal coordinates in [0, 1), wrapping.
            v: Vertical coordinates in [0, 1], 1 at the top (north).

        Returns:
            uint8 array of shape (N, 3) with RGB colors.
        """
        ...


@runtime_checkable
class RenderSurface(Protocol):
    """Port for a 2-D drawing surface in pixel coordinates."""

    def draw_image(self, pixels: np.ndarray) -> None:
        """Replace the surface contents with an (H, W, 3) uint8 image."""
        ...

    def stroke_path(
        self,
        segments: Sequence[np.ndarray],
        color: str,
        width: float,
    ) -> None:
        """Stroke a path; each (N, 2) segment starts with a move-to."""
        ...

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        """Fill a circle centred on (x, y)."""
        ...

    def draw_text(self, x: float, y: float, text: str, color: str) -> None:
        """Draw a left-aligned text label with its baseline at (x, y)."""
        ...
