"""Per-pixel salience maps: detail, skin, saturation and boost."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..constants import CHANNELS
from ..enums import AnalysisChannel
from ..imaging.pixel_buffer import PixelBuffer
from ..models import BoostArea
from ..options import Options

logger = logging.getLogger("smartcrop.analysis.salience")


def _rescale_excess(value: np.ndarray, threshold: float) -> np.ndarray:
    """Map ``value`` in (threshold, 1] onto (0, 255]."""
    return np.minimum(255.0, (value - threshold) * (255.0 / (1.0 - threshold)))


def edge_detect(image: PixelBuffer) -> np.ndarray:
    """Detail channel: luma on the border, 4-neighbour Laplacian of luma inside.

    Args:
        image: Source pixels.

    Returns:
        ``(height, width)`` uint8 array.
    """
    cie = image.cie()
    lightness = cie.copy()

    if image.height > 2 and image.width > 2:
        lightness[1:-1, 1:-1] = (
            cie[1:-1, 1:-1] * 4
            - cie[:-2, 1:-1]  # above
            - cie[1:-1, :-2]  # left
            - cie[1:-1, 2:]  # right
            - cie[2:, 1:-1]  # below
        )

    return np.clip(np.rint(lightness), 0, 255).astype(np.uint8)


def skin_color_similarity(image: PixelBuffer, skin_color: tuple[float, float, float]) -> np.ndarray:
    """Return ``1 - distance`` between each unit-length pixel colour and ``skin_color``."""
    red, green, blue = image.red(), image.green(), image.blue()
    magnitude = np.sqrt(red * red + green * green + blue * blue)

    # Black pixels have no direction; leave them at the origin
    safe = magnitude > 0
    with np.errstate(divide="ignore", invalid="ignore"):
        rd = np.where(safe, red / magnitude, 0.0) - skin_color[0]
        gd = np.where(safe, green / magnitude, 0.0) - skin_color[1]
        bd = np.where(safe, blue / magnitude, 0.0) - skin_color[2]

    return 1.0 - np.sqrt(rd * rd + gd * gd + bd * bd)


def skin_detect(image: PixelBuffer, options: Options) -> np.ndarray:
    """Skin channel: rescaled excess skin similarity within the brightness window."""
    lightness = image.cie() / 255.0
    skin = skin_color_similarity(image, options.skin_color)

    is_skin_color = skin > options.skin_threshold
    is_skin_brightness = (
        (lightness >= options.skin_brightness_min)
        & (lightness <= options.skin_brightness_max)
    )

    values = np.where(
        is_skin_color & is_skin_brightness,
        _rescale_excess(skin, options.skin_threshold),
        0.0,
    )
    return values.astype(np.uint8)


def saturation(image: PixelBuffer) -> np.ndarray:
    """HSL saturation of every pixel, in [0, 1]."""
    red = image.red() / 255.0
    green = image.green() / 255.0
    blue = image.blue() / 255.0

    maximum = np.maximum(red, np.maximum(green, blue))
    minimum = np.minimum(red, np.minimum(green, blue))
    lightness = (maximum + minimum) / 2
    delta = maximum - minimum

    with np.errstate(divide="ignore", invalid="ignore"):
        sat = np.where(
            lightness > 0.5,
            delta / (2 - maximum - minimum),
            delta / (maximum + minimum),
        )

    return np.where(maximum == minimum, 0.0, sat)


def saturation_detect(image: PixelBuffer, options: Options) -> np.ndarray:
    """Saturation channel: rescaled excess saturation within the brightness window."""
    lightness = image.cie() / 255.0
    sat = saturation(image)

    acceptable_saturation = sat > options.saturation_threshold
    acceptable_lightness = (
        (lightness >= options.saturation_brightness_min)
        & (lightness <= options.saturation_brightness_max)
    )

    values = np.where(
        acceptable_saturation & acceptable_lightness,
        _rescale_excess(sat, options.saturation_threshold),
        0.0,
    )
    return values.astype(np.uint8)


def apply_boosts(analysis: np.ndarray, boost_areas: Sequence[BoostArea]) -> None:
    """Reset and fill the boost channel of ``analysis`` in place.

    Each area adds ``weight * 255`` to the pixels it covers, clamped to
    [0, 255] after every area. Parts of an area outside the buffer are ignored.
    """
    boost = analysis[:, :, AnalysisChannel.BOOST]
    boost[:] = 0

    height, width = boost.shape
    for boost_area in boost_areas:
        area = boost_area.area
        x0, x1 = max(0, area.x), min(width, area.right)
        y0, y1 = max(0, area.y), min(height, area.bottom)
        if x0 >= x1 or y0 >= y1:
            continue

        region = boost[y0:y1, x0:x1].astype(np.float64) + boost_area.weight * 255
        boost[y0:y1, x0:x1] = np.clip(region, 0, 255).astype(np.uint8)


def build_analysis_buffer(
    image: PixelBuffer,
    options: Options,
    boost_areas: Sequence[BoostArea] = (),
) -> np.ndarray:
    """Run every detection pass and composite the boost areas.

    Args:
        image: Working (possibly prescaled) pixels.
        options: Detection thresholds and weights.
        boost_areas: Boost areas in the working image's coordinates.

    Returns:
        ``(height, width, 4)`` uint8 array indexed by AnalysisChannel.
    """
    analysis = np.zeros((image.height, image.width, CHANNELS), dtype=np.uint8)
    analysis[:, :, AnalysisChannel.DETAIL] = edge_detect(image)
    analysis[:, :, AnalysisChannel.SKIN] = skin_detect(image, options)
    analysis[:, :, AnalysisChannel.SATURATION] = saturation_detect(image, options)
    apply_boosts(analysis, boost_areas)

    logger.debug(
        "Analysis %dx%d: detail max %d, skin max %d, saturation max %d, %d boost areas",
        image.width,
        image.height,
        int(analysis[:, :, AnalysisChannel.DETAIL].max()),
        int(analysis[:, :, AnalysisChannel.SKIN].max()),
        int(analysis[:, :, AnalysisChannel.SATURATION].max()),
        len(boost_areas),
    )
    return analysis
