"""Debug visualization of the analysis buffer and scored candidates."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image, ImageDraw

from .config import Config
from .constants import CHANNELS
from .enums import AnalysisChannel, ChannelOrder
from .imaging.pixel_buffer import PixelBuffer
from .models import DebugInfo, Rectangle

logger = logging.getLogger("smartcrop.debug")


def analysis_to_pixels(analysis: np.ndarray) -> PixelBuffer:
    """Map the analysis channels onto an RGBA buffer.

    Skin goes to red, detail to green, saturation to blue and boost to alpha.
    """
    pixels = np.empty(analysis.shape[:2] + (CHANNELS,), dtype=np.uint8)
    pixels[:, :, 0] = analysis[:, :, AnalysisChannel.SKIN]
    pixels[:, :, 1] = analysis[:, :, AnalysisChannel.DETAIL]
    pixels[:, :, 2] = analysis[:, :, AnalysisChannel.SATURATION]
    pixels[:, :, 3] = analysis[:, :, AnalysisChannel.BOOST]
    return PixelBuffer(data=pixels, order=ChannelOrder.RGBA)


def render_debug_overlay(
    debug_info: DebugInfo,
    area: Rectangle,
    top: int = Config.MAX_DEBUG_CROPS,
) -> Image.Image:
    """Draw the chosen crop and the best-scoring candidates over the debug image.

    The boost channel is dropped so unboosted regions stay visible.

    Args:
        debug_info: Debug payload of a crop result.
        area: Winning rectangle in source image coordinates.
        top: Number of best candidates to outline.

    Returns:
        RGB Pillow image.
    """
    canvas = debug_info.output_image().convert("RGB")
    source_w, source_h = debug_info.source_size
    scale_x = canvas.width / source_w if source_w > 0 else 1.0
    scale_y = canvas.height / source_h if source_h > 0 else 1.0

    logger.debug(
        "Rendering debug overlay %dx%d with %d candidates",
        canvas.width, canvas.height, min(top, len(debug_info.crops)),
    )
    draw = ImageDraw.Draw(canvas)
    for crop in debug_info.top_crops(top):
        draw.rectangle(
            _scaled_box(crop.area, scale_x, scale_y),
            outline=Config.DEBUG_CANDIDATE_OUTLINE,
            width=1,
        )
    draw.rectangle(
        _scaled_box(area, scale_x, scale_y),
        outline=Config.DEBUG_CROP_OUTLINE,
        width=Config.DEBUG_OUTLINE_WIDTH,
    )
    return canvas


def _scaled_box(area: Rectangle, scale_x: float, scale_y: float) -> tuple[int, int, int, int]:
    return (
        int(area.x * scale_x),
        int(area.y * scale_y),
        max(int(area.x * scale_x), int(area.right * scale_x) - 1),
        max(int(area.y * scale_y), int(area.bottom * scale_y) - 1),
    )
