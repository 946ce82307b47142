"""Shared pytest fixtures for smartcrop tests."""

from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from backend.smartcrop.enums import ChannelOrder
from backend.smartcrop.imaging.pixel_buffer import PixelBuffer

# A colour close to the default reference skin tone, as (R, G, B)
SKIN_RGB = (200, 146, 113)


def solid_buffer(
    w: int,
    h: int,
    color: tuple[int, int, int] = (128, 128, 128),
    order: ChannelOrder = ChannelOrder.RGBA,
) -> PixelBuffer:
    """Create a solid pixel buffer; ``color`` is given as (R, G, B)."""
    r, g, b = color
    pixel = (r, g, b, 255) if order is ChannelOrder.RGBA else (b, g, r, 255)
    data = np.empty((h, w, 4), dtype=np.uint8)
    data[:, :] = pixel
    return PixelBuffer(data=data, order=order)


@pytest.fixture
def gray_image() -> Image.Image:
    """Content-free 200x100 gray image."""
    return Image.new("RGBA", (200, 100), (128, 128, 128, 255))


@pytest.fixture
def black_image() -> Image.Image:
    return Image.new("RGBA", (200, 100), (0, 0, 0, 255))


@pytest.fixture
def red_patch_image() -> Image.Image:
    """300x100 gray image with a saturated red 40x40 patch at (220, 30)."""
    img = Image.new("RGBA", (300, 100), (128, 128, 128, 255))
    img.paste((255, 0, 0, 255), (220, 30, 260, 70))
    return img


@pytest.fixture
def noise_image() -> Image.Image:
    """Deterministic random RGB image."""
    rng = np.random.default_rng(1234)
    data = rng.integers(0, 256, size=(90, 120, 3), dtype=np.uint8)
    return Image.fromarray(data)


@pytest.fixture
def skin_buffer() -> PixelBuffer:
    return solid_buffer(4, 4, SKIN_RGB)


@pytest.fixture
def make_buffer():
    """Factory fixture returning ``solid_buffer``."""
    return solid_buffer


@pytest.fixture
def skin_rgb() -> tuple[int, int, int]:
    return SKIN_RGB
