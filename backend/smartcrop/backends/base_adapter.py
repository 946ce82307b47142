"""Abstract base adapter for image backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..imaging.pixel_buffer import PixelBuffer
from ..models import Rectangle


class BaseImageAdapter(ABC):
    """Translate a backend's native image object to and from a PixelBuffer."""

    @abstractmethod
    def supports(self, image: Any) -> bool:
        """Return True if this adapter handles the given image object.

        Args:
            image: Object to check.

        Returns:
            True if supported.
        """
        ...

    @abstractmethod
    def to_buffer(self, image: Any) -> PixelBuffer:
        """Convert a native image into a 4-channel pixel buffer.

        Args:
            image: Native image object.

        Returns:
            PixelBuffer sharing no memory the caller is expected to mutate.

        Raises:
            InvalidImageError: If the image layout cannot be converted.
        """
        ...

    @abstractmethod
    def crop(self, image: Any, area: Rectangle) -> Any:
        """Copy ``area`` out of a native image.

        Args:
            image: Native image object.
            area: Rectangle in the image's coordinates.

        Returns:
            New native image of ``area.width x area.height`` pixels.
        """
        ...
