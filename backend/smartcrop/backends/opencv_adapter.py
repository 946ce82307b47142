"""OpenCV (numpy array) image adapter."""

from __future__ import annotations

import logging
from typing import Any

import cv2
import numpy as np

from ..enums import ChannelOrder
from ..exceptions import InvalidImageError
from ..imaging.pixel_buffer import PixelBuffer
from ..models import Rectangle
from .base_adapter import BaseImageAdapter

logger = logging.getLogger("smartcrop.backends.opencv")


class OpenCVImageAdapter(BaseImageAdapter):
    """Adapt numpy arrays as returned by ``cv2.imread``.

    Arrays are taken to be grayscale, BGR or BGRA. Pixels in another order
    must be wrapped in a PixelBuffer with an explicit ChannelOrder instead.
    """

    _CONVERSIONS = {
        1: cv2.COLOR_GRAY2BGRA,
        3: cv2.COLOR_BGR2BGRA,
    }

    def supports(self, image: Any) -> bool:
        return isinstance(image, np.ndarray)

    def to_buffer(self, image: np.ndarray) -> PixelBuffer:
        if image.dtype != np.uint8:
            raise InvalidImageError(f"OpenCV image must be uint8, got {image.dtype}")
        if image.ndim not in (2, 3) or image.shape[0] == 0 or image.shape[1] == 0:
            raise InvalidImageError(f"Unsupported OpenCV image shape {image.shape}")

        channels = 1 if image.ndim == 2 else image.shape[2]
        if channels == 4:
            bgra = image.copy()
        elif channels in self._CONVERSIONS:
            bgra = cv2.cvtColor(image, self._CONVERSIONS[channels])
        else:
            raise InvalidImageError(
                f"Unsupported channel count {channels}. Allowed: 1, 3, 4"
            )

        logger.debug(
            "Adapted OpenCV image %dx%d with %d channels",
            image.shape[1], image.shape[0], channels,
        )
        return PixelBuffer(data=bgra, order=ChannelOrder.BGRA)

    def crop(self, image: np.ndarray, area: Rectangle) -> np.ndarray:
        return image[area.y:area.bottom, area.x:area.right].copy()
