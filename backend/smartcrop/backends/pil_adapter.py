"""Pillow image adapter."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from PIL import Image

from ..enums import ChannelOrder
from ..exceptions import InvalidImageError
from ..imaging.pixel_buffer import PixelBuffer
from ..models import Rectangle
from .base_adapter import BaseImageAdapter

logger = logging.getLogger("smartcrop.backends.pil")


class PILImageAdapter(BaseImageAdapter):
    """Adapt Pillow images of any mode; non-RGBA modes are converted to RGBA."""

    def supports(self, image: Any) -> bool:
        return isinstance(image, Image.Image)

    def to_buffer(self, image: Image.Image) -> PixelBuffer:
        try:
            rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        except (ValueError, OSError) as e:
            raise InvalidImageError(f"Cannot convert {image.mode} image to RGBA: {e}") from e

        logger.debug("Adapted Pillow %s image %dx%d", image.mode, image.width, image.height)
        return PixelBuffer(data=np.array(rgba, dtype=np.uint8), order=ChannelOrder.RGBA)

    def crop(self, image: Image.Image, area: Rectangle) -> Image.Image:
        return image.crop(area.to_box())
