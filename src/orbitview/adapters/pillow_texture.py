# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Globe texture adapter.

Decodes an equirectangular image with Pillow and samples it with numpy.
External dependencies (Pillow, file I/O) are confined to this adapter.
"""
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from orbitview.domain.errors import ResourceLoadError
from orbitview.ports.rendering import TextureSampler

logger = logging.getLogger(__name__)

_OCEAN = (18, 52, 110)
_GRID = (200, 200, 200)


class ImageTexture(TextureSampler):
    """Nearest-neighbour sampler over an (H, W, 3) uint8 image."""

    def __init__(self, pixels: np.ndarray) -> None:
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 3 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError(f"Texture must have shape (H, W, 3), got {pixels.shape}")
        self.pixels = pixels.astype(np.uint8, copy=False)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def sample(self, u: np.ndarray, v: np.ndarray) -> np.ndarray:
        u = np.asarray(u, dtype=float)
        v = np.asarray(v, dtype=float)
        tx = np.mod(np.floor(u * self.width).astype(np.int64), self.width)
        ty = np.clip(np.floor((1.0 - v) * self.height).astype(np.int64), 0, self.height - 1)
        return self.pixels[ty, tx]

    @classmethod
    def graticule(cls, width: int = 360, height: int = 180, spacing_deg: int = 30) -> "ImageTexture":
        """Placeholder texture: ocean colour with a lat/lon grid."""
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = _OCEAN
        col_step = max(1, round(width * spacing_deg / 360))
        row_step = max(1, round(height * spacing_deg / 180))
        pixels[:, ::col_step] = _GRID
        pixels[::row_step, :] = _GRID
        return cls(pixels)


def load_texture(path: str) -> ImageTexture:
    """
    Load a globe texture from an image file.

    Raises:
        ResourceLoadError: If the file is missing or cannot be decoded.
    """
    try:
        with Image.open(path) as image:
            pixels = np.asarray(image.convert("RGB"))
    except (OSError, UnidentifiedImageError) as e:
        raise ResourceLoadError(f"Failed to load the globe texture '{path}': {e}") from e
    logger.debug("Loaded texture %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
    return ImageTexture(pixels)
