"""Pixel buffer abstraction and resampling."""

from .pixel_buffer import PixelBuffer
from .resize import resize_pixels

__all__ = ["PixelBuffer", "resize_pixels"]
