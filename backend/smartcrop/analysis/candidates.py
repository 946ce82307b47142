"""Enumeration of candidate crop rectangles."""

from __future__ import annotations

import logging
import math

from ..models import Crop, Rectangle
from ..options import CropParameters, Options

logger = logging.getLogger("smartcrop.analysis.candidates")

_SCALE_EPSILON = 1e-9


def scale_range(max_scale: float, min_scale: float, scale_step: float) -> list[float]:
    """Return scales from ``max_scale`` down to ``min_scale`` inclusive."""
    if max_scale < min_scale:
        return []
    count = math.floor((max_scale - min_scale) / scale_step + _SCALE_EPSILON) + 1
    return [max_scale - i * scale_step for i in range(count)]


def generate_crops(
    image_width: int,
    image_height: int,
    params: CropParameters,
    options: Options,
) -> list[Crop]:
    """Enumerate unscored candidates over the scale x y x x grid.

    Candidates are ordered scale-major (largest first), then by row, then
    by column; selection relies on this order to break ties.

    Args:
        image_width: Working image width.
        image_height: Working image height.
        params: Resolved crop size and scale range.
        options: Supplies ``step`` and ``scale_step``.

    Returns:
        Candidates in generation order; may be empty.
    """
    min_dimension = min(image_width, image_height)
    crop_width = params.crop_width if params.crop_width is not None else min_dimension
    crop_height = params.crop_height if params.crop_height is not None else min_dimension

    crops: list[Crop] = []
    for scale in scale_range(params.max_scale, params.min_scale, options.scale_step):
        scaled_width = crop_width * scale
        scaled_height = crop_height * scale
        width = round(scaled_width)
        height = round(scaled_height)
        if width <= 0 or height <= 0:
            continue

        y = 0
        while y + scaled_height <= image_height:
            x = 0
            while x + scaled_width <= image_width:
                crops.append(Crop(area=Rectangle(x, y, width, height)))
                x += options.step
            y += options.step

    logger.debug(
        "Generated %d candidates for %dx%d (crop %dx%d)",
        len(crops), image_width, image_height, crop_width, crop_height,
    )
    return crops
