"""Per-call crop options and the parameters derived from them."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from .config import Config
from .constants import DEFAULT_SKIN_COLOR

logger = logging.getLogger("smartcrop.options")


@dataclass(frozen=True)
class Options:
    """Tunable weights, thresholds and search grid for one crop call.

    ``width``/``height`` describe the target box (0 means unconstrained);
    a positive ``aspect`` overrides them with an ``aspect x 1`` box.
    """
    width: int = 0
    height: int = 0
    aspect: float = 0.0
    detail_weight: float = 0.2
    skin_color: tuple[float, float, float] = DEFAULT_SKIN_COLOR
    skin_bias: float = 0.01
    skin_brightness_min: float = 0.2
    skin_brightness_max: float = 1.0
    skin_threshold: float = 0.8
    skin_weight: float = 1.8
    saturation_brightness_min: float = 0.05
    saturation_brightness_max: float = 0.9
    saturation_threshold: float = 0.4
    saturation_bias: float = 0.2
    saturation_weight: float = 0.1
    # step * min_scale rounded down to a power of two works well here
    score_down_sample: int = 8
    step: int = 8
    scale_step: float = 0.1
    min_scale: float = 1.0
    max_scale: float = 1.0
    edge_radius: float = 0.4
    edge_weight: float = -20.0
    outside_importance: float = -0.5
    boost_weight: float = 100.0
    rule_of_thirds: bool = True
    prescale: bool = True
    debug: bool = False

    @classmethod
    def for_size(cls, width: int, height: int, **overrides: object) -> Options:
        return cls(width=width, height=height, **overrides)

    def replace(self, **changes: object) -> Options:
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class CropParameters:
    """Values resolved once per call from an Options snapshot and the image size.

    ``crop_width``/``crop_height`` are ``None`` when no target box was given;
    candidate generation then falls back to the image's smaller dimension.
    """
    crop_width: int | None
    crop_height: int | None
    min_scale: float
    max_scale: float
    prescale: float = 1.0

    @property
    def is_prescaled(self) -> bool:
        return self.prescale < 1.0


def derive_parameters(
    options: Options, image_width: int, image_height: int
) -> CropParameters:
    """Resolve target crop size, scale range and prescale factor.

    Args:
        options: Validated crop options (never modified).
        image_width: Width of the source image in pixels.
        image_height: Height of the source image in pixels.

    Returns:
        CropParameters expressed in the coordinate space of the working
        (possibly prescaled) image.
    """
    width: float = options.width
    height: float = options.height
    if options.aspect > 0:
        width = options.aspect
        height = 1

    crop_width: int | None = None
    crop_height: int | None = None
    min_scale = options.min_scale

    if width > 0 and height > 0:
        scale = min(image_width / width, image_height / height)
        crop_width = round(width * scale)
        crop_height = round(height * scale)
        # Never pick crops that would need upscaling
        min_scale = min(options.max_scale, max(1.0 / scale, options.min_scale))

    prescale = 1.0
    if options.prescale:
        reference = Config.PRESCALE_REFERENCE_SIZE
        prescale = min(max(reference / image_width, reference / image_height), 1.0)
        if prescale < 1.0:
            if crop_width is not None and crop_height is not None:
                crop_width = round(crop_width * prescale)
                crop_height = round(crop_height * prescale)
        else:
            prescale = 1.0

    logger.debug(
        "Derived crop %sx%s, scales %.3f..%.3f, prescale %.4f",
        crop_width, crop_height, min_scale, options.max_scale, prescale,
    )

    return CropParameters(
        crop_width=crop_width,
        crop_height=crop_height,
        min_scale=min_scale,
        max_scale=options.max_scale,
        prescale=prescale,
    )
