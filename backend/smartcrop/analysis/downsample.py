"""Box-filter reduction of the analysis buffer into the scoring buffer."""

from __future__ import annotations

import logging

import numpy as np

from ..constants import (
    CHANNELS,
    DETAIL_MAX_WEIGHT,
    DETAIL_MEAN_WEIGHT,
    SKIN_MAX_WEIGHT,
    SKIN_MEAN_WEIGHT,
)
from ..enums import AnalysisChannel

logger = logging.getLogger("smartcrop.analysis.downsample")


def downsample(analysis: np.ndarray, factor: int) -> np.ndarray:
    """Reduce every ``factor x factor`` tile of ``analysis`` to one cell.

    Output dimensions are floored, so a trailing partial tile on the right
    or bottom is dropped. Skin and detail blend the tile mean with the tile
    maximum so small strong features survive; saturation and boost use the
    plain mean. All outputs are truncated to uint8.

    Args:
        analysis: ``(height, width, 4)`` uint8 analysis buffer.
        factor: Tile edge length in pixels.

    Returns:
        ``(height // factor, width // factor, 4)`` uint8 array.
    """
    height = analysis.shape[0] // factor
    width = analysis.shape[1] // factor

    tiles = (
        analysis[:height * factor, :width * factor]
        .reshape(height, factor, width, factor, CHANNELS)
        .astype(np.float64)
    )
    mean = tiles.sum(axis=(1, 3)) * (1.0 / (factor * factor))
    peak = tiles.max(axis=(1, 3))

    output = np.empty((height, width, CHANNELS), dtype=np.uint8)

    detail = AnalysisChannel.DETAIL
    skin = AnalysisChannel.SKIN
    output[:, :, detail] = (
        mean[:, :, detail] * DETAIL_MEAN_WEIGHT + peak[:, :, detail] * DETAIL_MAX_WEIGHT
    ).astype(np.uint8)
    output[:, :, skin] = (
        mean[:, :, skin] * SKIN_MEAN_WEIGHT + peak[:, :, skin] * SKIN_MAX_WEIGHT
    ).astype(np.uint8)
    output[:, :, AnalysisChannel.SATURATION] = mean[:, :, AnalysisChannel.SATURATION].astype(np.uint8)
    output[:, :, AnalysisChannel.BOOST] = mean[:, :, AnalysisChannel.BOOST].astype(np.uint8)

    logger.debug(
        "Downsampled %dx%d by %d -> %dx%d",
        analysis.shape[1], analysis.shape[0], factor, width, height,
    )
    return output
