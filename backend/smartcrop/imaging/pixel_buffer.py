"""Canonical 4-channel pixel buffer shared by every image backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image

from ..constants import CHANNELS, LUMA_BLUE, LUMA_GREEN, LUMA_RED
from ..enums import ChannelOrder
from ..exceptions import InvalidImageError
from .resize import resize_pixels


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major ``(height, width, 4)`` uint8 pixels with a declared channel order.

    The row stride is ``width * 4`` bytes. Channel accessors return float
    copies so callers can do arithmetic without uint8 wrap-around.
    """
    data: np.ndarray
    order: ChannelOrder = ChannelOrder.RGBA

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def stride(self) -> int:
        return self.width * CHANNELS

    def red(self) -> np.ndarray:
        return self.data[:, :, self.order.red_index].astype(np.float64)

    def green(self) -> np.ndarray:
        return self.data[:, :, self.order.green_index].astype(np.float64)

    def blue(self) -> np.ndarray:
        return self.data[:, :, self.order.blue_index].astype(np.float64)

    def alpha(self) -> np.ndarray:
        return self.data[:, :, self.order.alpha_index].astype(np.float64)

    def cie(self) -> np.ndarray:
        """Per-pixel luma on the 0..255 scale."""
        return LUMA_RED * self.red() + LUMA_GREEN * self.green() + LUMA_BLUE * self.blue()

    @classmethod
    def from_bytes(
        cls,
        data: bytes | bytearray | memoryview,
        width: int,
        height: int,
        order: ChannelOrder = ChannelOrder.RGBA,
    ) -> PixelBuffer:
        """Wrap a raw row-major 4-bytes-per-pixel buffer.

        Raises:
            InvalidImageError: If the dimensions are not positive or the
                byte count does not match ``width * height * 4``.
        """
        if width <= 0 or height <= 0:
            raise InvalidImageError(f"Image dimensions must be positive, got {width}x{height}")
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise InvalidImageError(
                f"Expected {expected} bytes for a {width}x{height} image, got {len(data)}"
            )
        array = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNELS)
        return cls(data=array.copy(), order=order)

    def to_rgba_array(self) -> np.ndarray:
        if self.order is ChannelOrder.RGBA:
            return self.data
        return self.data[:, :, [2, 1, 0, 3]]

    def to_pil(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.to_rgba_array()))

    def resized(self, size: tuple[int, int]) -> PixelBuffer:
        """Return a resampled copy at ``size`` (width, height), keeping the channel order."""
        return PixelBuffer(data=resize_pixels(self.data, size), order=self.order)
