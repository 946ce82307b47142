"""Salience analysis, downsampling, candidate generation and scoring."""

from .candidates import generate_crops, scale_range
from .downsample import downsample
from .salience import (
    apply_boosts,
    build_analysis_buffer,
    edge_detect,
    saturation_detect,
    skin_detect,
)
from .scoring import CropScorer, boost_penalty, importance, select_best, thirds

__all__ = [
    "CropScorer",
    "apply_boosts",
    "boost_penalty",
    "build_analysis_buffer",
    "downsample",
    "edge_detect",
    "generate_crops",
    "importance",
    "saturation_detect",
    "scale_range",
    "select_best",
    "skin_detect",
    "thirds",
]
