"""Input validation for smartcrop."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .constants import CHANNELS
from .enums import ChannelOrder
from .exceptions import InvalidConfigurationError, InvalidImageError
from .imaging.pixel_buffer import PixelBuffer
from .models import BoostArea
from .options import Options


def validate_pixel_buffer(buffer: PixelBuffer | None) -> None:
    """Validate the pixel buffer handed to the crop engine.

    Args:
        buffer: Candidate pixel buffer.

    Raises:
        InvalidImageError: If the buffer is missing, empty, not uint8 or not
            4 channels in a supported order.
    """
    if buffer is None:
        raise InvalidImageError("Image must not be None")
    if not isinstance(buffer.order, ChannelOrder):
        raise InvalidImageError(
            f"Unsupported channel order {buffer.order!r}. Allowed: "
            f"{', '.join(o.name for o in ChannelOrder)}"
        )

    data = buffer.data
    if not isinstance(data, np.ndarray) or data.dtype != np.uint8:
        raise InvalidImageError("Pixel data must be a uint8 numpy array")
    if data.ndim != 3 or data.shape[2] != CHANNELS:
        raise InvalidImageError(
            f"Pixel data must have shape (height, width, {CHANNELS}), got {data.shape}"
        )
    if data.shape[0] <= 0 or data.shape[1] <= 0:
        raise InvalidImageError(
            f"Image must not be empty, got {data.shape[1]}x{data.shape[0]}"
        )


def validate_options(options: Options) -> None:
    """Validate crop options.

    Args:
        options: Options snapshot for the current call.

    Raises:
        InvalidConfigurationError: If any field makes the search ill-defined.
    """
    if options.score_down_sample <= 0:
        raise InvalidConfigurationError(
            f"score_down_sample must be positive, got {options.score_down_sample}"
        )
    if options.step <= 0:
        raise InvalidConfigurationError(f"step must be positive, got {options.step}")
    if options.scale_step <= 0:
        raise InvalidConfigurationError(
            f"scale_step must be positive, got {options.scale_step}"
        )
    if options.max_scale <= 0:
        raise InvalidConfigurationError(
            f"max_scale must be positive, got {options.max_scale}"
        )
    if options.min_scale <= 0:
        raise InvalidConfigurationError(
            f"min_scale must be positive, got {options.min_scale}"
        )
    if options.min_scale > options.max_scale:
        raise InvalidConfigurationError(
            f"min_scale {options.min_scale} exceeds max_scale {options.max_scale}"
        )
    if options.width < 0 or options.height < 0 or options.aspect < 0:
        raise InvalidConfigurationError(
            f"Target size must not be negative, got {options.width}x{options.height} "
            f"(aspect {options.aspect})"
        )
    for name in ("skin_threshold", "saturation_threshold"):
        if getattr(options, name) >= 1.0:
            raise InvalidConfigurationError(f"{name} must be below 1.0")


def validate_boost_areas(boost_areas: Sequence[BoostArea]) -> None:
    """Validate caller-supplied boost areas.

    Raises:
        InvalidConfigurationError: If an entry is not a BoostArea or has a
            negative size.
    """
    for index, boost in enumerate(boost_areas):
        if not isinstance(boost, BoostArea):
            raise InvalidConfigurationError(
                f"Boost area {index} must be a BoostArea, got {type(boost).__name__}"
            )
        if boost.area.width < 0 or boost.area.height < 0:
            raise InvalidConfigurationError(
                f"Boost area {index} has negative size "
                f"{boost.area.width}x{boost.area.height}"
            )
