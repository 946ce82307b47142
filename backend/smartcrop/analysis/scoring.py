"""Importance model and candidate scoring."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from ..constants import RADIAL_PEAK, THIRDS_GAIN, THIRDS_OFFSET, THIRDS_SHARPNESS
from ..enums import AnalysisChannel
from ..models import BoostArea, Crop, Rectangle, Score
from ..options import Options

logger = logging.getLogger("smartcrop.analysis.scoring")


def thirds(value: float | np.ndarray) -> float | np.ndarray:
    """Rule-of-thirds weight for a centre distance in [0, 1].

    ``value`` is 0 at the crop centre and 1 at its edge; the weight peaks
    at 1.0 on the third lines and falls to 0 away from them.
    """
    x = np.asarray(value, dtype=np.float64)
    x = (((x - 1.0 / 3.0 + 1.0) % 2.0) * 0.5 - 0.5) * THIRDS_SHARPNESS
    result = np.maximum(1.0 - x * x, 0.0)
    return float(result) if result.ndim == 0 else result


def importance(
    crop: Rectangle,
    x: float | np.ndarray,
    y: float | np.ndarray,
    options: Options,
) -> float | np.ndarray:
    """Weight of the sample at (x, y) for ``crop``.

    Samples outside the crop get ``options.outside_importance``. Inside, the
    weight peaks at the centre, drops sharply within ``edge_radius`` of the
    border and, with ``rule_of_thirds``, gains a bonus on the third lines.
    """
    xs = np.asarray(x, dtype=np.float64)
    ys = np.asarray(y, dtype=np.float64)

    outside = (
        (crop.x > xs) | (xs >= crop.x + crop.width)
        | (crop.y > ys) | (ys >= crop.y + crop.height)
    )

    px = np.abs(0.5 - (xs - crop.x) / crop.width) * 2
    py = np.abs(0.5 - (ys - crop.y) / crop.height) * 2

    # Distance from edge
    dx = np.maximum(px - 1.0 + options.edge_radius, 0.0)
    dy = np.maximum(py - 1.0 + options.edge_radius, 0.0)
    d = (dx * dx + dy * dy) * options.edge_weight
    s = RADIAL_PEAK - np.sqrt(px * px + py * py)
    if options.rule_of_thirds:
        s = s + np.maximum(0.0, s + d + THIRDS_OFFSET) * THIRDS_GAIN * (thirds(px) + thirds(py))

    result = np.where(outside, options.outside_importance, s + d)
    return float(result) if result.ndim == 0 else result


def boost_penalty(crop: Rectangle, boost_areas: Sequence[BoostArea]) -> float:
    """Mean weight of the boost areas the crop cuts through.

    Areas fully inside the crop or entirely outside it cost nothing.
    """
    if not boost_areas:
        return 0.0

    penalty = 0.0
    for boost_area in boost_areas:
        if crop.contains(boost_area.area):
            continue
        if boost_area.area.intersects(crop):
            penalty += boost_area.weight

    return penalty / len(boost_areas)


def _exact_sum(values: np.ndarray) -> float:
    # Correctly rounded, so equal multisets of products give equal sums
    return math.fsum(values.ravel())


class CropScorer:
    """Score candidates against one downsampled analysis buffer.

    The buffer's cells are sampled at ``score_down_sample`` pixel spacing in
    working-image coordinates, so each cell is one sample.
    """

    def __init__(
        self,
        downsampled: np.ndarray,
        options: Options,
        boost_areas: Sequence[BoostArea] = (),
    ) -> None:
        self.options = options
        self.boost_areas = tuple(boost_areas)

        channels = downsampled.astype(np.float64) / 255.0
        self.detail = channels[:, :, AnalysisChannel.DETAIL]
        self.skin = channels[:, :, AnalysisChannel.SKIN]
        self.saturation = channels[:, :, AnalysisChannel.SATURATION]
        self.boost = channels[:, :, AnalysisChannel.BOOST]

        # Skin and saturation are weighted by the same sample's detail
        self.skin_term = self.skin * (self.detail + options.skin_bias)
        self.saturation_term = self.saturation * (self.detail + options.saturation_bias)

        factor = options.score_down_sample
        height, width = downsampled.shape[:2]
        self.sample_y, self.sample_x = np.meshgrid(
            np.arange(height, dtype=np.float64) * factor,
            np.arange(width, dtype=np.float64) * factor,
            indexing="ij",
        )

    def score(self, crop: Rectangle) -> Score:
        """Return the weighted, penalty-adjusted score of ``crop``."""
        options = self.options
        weights = importance(crop, self.sample_x, self.sample_y, options)

        detail = _exact_sum(self.detail * weights)
        skin = _exact_sum(self.skin_term * weights)
        saturation = _exact_sum(self.saturation_term * weights)
        boost = _exact_sum(self.boost * weights)
        penalty = boost_penalty(crop, self.boost_areas)

        total = (
            detail * options.detail_weight
            + skin * options.skin_weight
            + saturation * options.saturation_weight
            + boost * options.boost_weight
        ) / (crop.width * crop.height)
        total -= total * penalty

        return Score(
            detail=detail,
            skin=skin,
            saturation=saturation,
            boost=boost,
            penalty=penalty,
            total=total,
        )

    def score_all(self, crops: Sequence[Crop]) -> list[Crop]:
        return [Crop(area=crop.area, score=self.score(crop.area)) for crop in crops]


def select_best(crops: Sequence[Crop]) -> Crop | None:
    """Return the first candidate with the highest total.

    A later candidate replaces the current best only with a strictly
    greater total, so ties go to the earliest generated candidate.
    """
    best: Crop | None = None
    top_score = float("-inf")
    for crop in crops:
        if crop.score.total > top_score:
            best = crop
            top_score = crop.score.total
    return best
