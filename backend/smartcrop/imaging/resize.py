"""Resampling of 4-channel pixel arrays for prescaling."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from ..config import Config

logger = logging.getLogger("smartcrop.imaging.resize")


def resize_pixels(
    data: np.ndarray, target_size: tuple[int, int]
) -> np.ndarray:
    """Resize a ``(height, width, 4)`` uint8 array.

    Channels are resampled independently, so the array may be in either
    RGBA or BGRA order. The alpha channel is treated as plain data, not
    premultiplied.

    Args:
        data: Source pixels.
        target_size: Target (width, height).

    Returns:
        Resized array; the source array itself if the target is not positive.
    """
    if target_size[0] <= 0 or target_size[1] <= 0:
        return data

    # Pillow's RGBA resize premultiplies alpha; resample as four L bands instead
    bands = [
        Image.fromarray(np.ascontiguousarray(data[:, :, i])).resize(
            target_size, Config.PRESCALE_RESAMPLE
        )
        for i in range(data.shape[2])
    ]
    resized = np.stack([np.asarray(band) for band in bands], axis=2)

    logger.debug(
        "Resized %dx%d -> %dx%d",
        data.shape[1], data.shape[0], target_size[0], target_size[1],
    )
    return resized
