"""Passthrough adapter for PixelBuffer inputs."""

from __future__ import annotations

from typing import Any

from ..imaging.pixel_buffer import PixelBuffer
from ..models import Rectangle
from .base_adapter import BaseImageAdapter


class PixelBufferAdapter(BaseImageAdapter):

    def supports(self, image: Any) -> bool:
        return isinstance(image, PixelBuffer)

    def to_buffer(self, image: PixelBuffer) -> PixelBuffer:
        return image

    def crop(self, image: PixelBuffer, area: Rectangle) -> PixelBuffer:
        return PixelBuffer(
            data=image.data[area.y:area.bottom, area.x:area.right].copy(),
            order=image.order,
        )
