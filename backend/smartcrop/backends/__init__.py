"""Image backend adapter factory for smartcrop."""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidImageError
from ..models import CropResult, Rectangle
from .base_adapter import BaseImageAdapter
from .buffer_adapter import PixelBufferAdapter
from .opencv_adapter import OpenCVImageAdapter
from .pil_adapter import PILImageAdapter

_ADAPTERS: list[BaseImageAdapter] = [
    PixelBufferAdapter(),
    PILImageAdapter(),
    OpenCVImageAdapter(),
]


def get_adapter(image: Any) -> BaseImageAdapter:
    """Get the appropriate adapter for an image object.

    Args:
        image: PixelBuffer, Pillow image or OpenCV (numpy) image.

    Returns:
        An adapter instance that supports the image.

    Raises:
        InvalidImageError: If no adapter supports the image.
    """
    if image is None:
        raise InvalidImageError("Image must not be None")
    for adapter in _ADAPTERS:
        if adapter.supports(image):
            return adapter
    raise InvalidImageError(
        f"No adapter for {type(image).__name__}. Supported: PixelBuffer, PIL.Image, numpy.ndarray"
    )


def apply_crop(image: Any, result: CropResult | Rectangle) -> Any:
    """Copy the chosen area out of ``image`` using its own backend."""
    area = result.area if isinstance(result, CropResult) else result
    return get_adapter(image).crop(image, area)


__all__ = [
    "BaseImageAdapter",
    "OpenCVImageAdapter",
    "PILImageAdapter",
    "PixelBufferAdapter",
    "apply_crop",
    "get_adapter",
]
