"""Global configuration for smartcrop."""

from __future__ import annotations

from PIL import Image


class Config:
    """Global configuration."""

    # Prescale
    PRESCALE_REFERENCE_SIZE = 256  # Images larger than this on both axes get shrunk
    PRESCALE_RESAMPLE = Image.Resampling.BILINEAR

    # Debug rendering
    DEBUG_CROP_OUTLINE = (255, 255, 0)
    DEBUG_CANDIDATE_OUTLINE = (255, 255, 255)
    DEBUG_OUTLINE_WIDTH = 2
    MAX_DEBUG_CROPS = 5

    # Sample app
    DEFAULT_CROP_SIZE = (100, 100)
