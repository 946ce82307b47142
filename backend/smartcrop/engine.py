"""Main crop orchestrator engine."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .analysis import (
    CropScorer,
    build_analysis_buffer,
    downsample,
    generate_crops,
    select_best,
)
from .backends import get_adapter
from .debug import analysis_to_pixels
from .exceptions import InvalidConfigurationError, NoCandidateError
from .imaging.pixel_buffer import PixelBuffer
from .models import BoostArea, CropResult, DebugInfo
from .options import Options, derive_parameters
from .validators import validate_boost_areas, validate_options, validate_pixel_buffer

logger = logging.getLogger("smartcrop.engine")


class ImageCrop:
    """Find the most interesting crop of an image.

    Usage:
        cropper = ImageCrop.for_size(100, 100)
        result = cropper.crop(pil_image)
        thumbnail = pil_image.crop(result.area.to_box())
    """

    def __init__(self, options: Options | None = None) -> None:
        self.options = options if options is not None else Options()

    @classmethod
    def for_size(cls, width: int, height: int) -> ImageCrop:
        return cls(Options.for_size(width, height))

    @property
    def options(self) -> Options:
        return self._options

    @options.setter
    def options(self, value: Options) -> None:
        if value is None:
            raise InvalidConfigurationError("Options must not be None")
        self._options = value

    def crop(
        self,
        image: Any,
        boost_areas: Sequence[BoostArea] = (),
    ) -> CropResult:
        """Score candidate crops and return the best one.

        Args:
            image: PixelBuffer, Pillow image or OpenCV (BGR/BGRA) array.
                Never modified.
            boost_areas: Regions to favour, in the image's coordinates.
                Never modified.

        Returns:
            CropResult whose area lies inside the image; with ``debug``
            enabled it also carries the analysis visualization and every
            scored candidate.

        Raises:
            InvalidImageError: If the image is missing, empty or unsupported.
            InvalidConfigurationError: If options or boost areas are invalid.
            NoCandidateError: If no candidate fits inside the image.
        """
        options = self.options
        source = get_adapter(image).to_buffer(image)
        validate_pixel_buffer(source)
        validate_options(options)
        validate_boost_areas(boost_areas)

        params = derive_parameters(options, source.width, source.height)

        working: PixelBuffer = source
        boosts = list(boost_areas)
        if params.is_prescaled:
            working = source.resized((
                round(source.width * params.prescale),
                round(source.height * params.prescale),
            ))
            boosts = [boost.scale(params.prescale) for boost in boosts]
            logger.debug(
                "Prescaled %dx%d -> %dx%d (factor %.4f)",
                source.width, source.height, working.width, working.height, params.prescale,
            )

        analysis = build_analysis_buffer(working, options, boosts)
        score_buffer = downsample(analysis, options.score_down_sample)

        candidates = generate_crops(working.width, working.height, params, options)
        if not candidates:
            raise NoCandidateError(
                f"No candidate crop of {params.crop_width}x{params.crop_height} fits a "
                f"{working.width}x{working.height} image at scales "
                f"{params.min_scale:.3f}..{params.max_scale:.3f}"
            )

        scorer = CropScorer(score_buffer, options, boosts)
        crops = scorer.score_all(candidates)
        best = select_best(crops)

        area = best.area
        if params.is_prescaled:
            area = area.inverse_scale(params.prescale)
        area = area.clamp(source.width, source.height)

        logger.debug(
            "Best of %d candidates: %s (score %.6f)",
            len(crops), area, best.score.total,
        )

        debug_info = None
        if options.debug:
            if params.is_prescaled:
                crops = [crop.inverse_scale(params.prescale) for crop in crops]
            debug_info = DebugInfo(
                output=analysis_to_pixels(analysis),
                options=options,
                crops=crops,
                source_size=source.size,
                parameters=params,
            )

        return CropResult(area=area, debug_info=debug_info)
