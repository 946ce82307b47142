"""Data structures for smartcrop."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from PIL import Image as PILImage

if TYPE_CHECKING:
    from .imaging.pixel_buffer import PixelBuffer
    from .options import CropParameters, Options


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned integer rectangle covering [x, right) x [y, bottom)."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, other: Rectangle) -> bool:
        """Return True if ``other`` lies entirely inside this rectangle."""
        return (
            self.x <= other.x
            and other.right <= self.right
            and self.y <= other.y
            and other.bottom <= self.bottom
        )

    def intersects(self, other: Rectangle) -> bool:
        """Return True if the two rectangles share at least one pixel."""
        return (
            other.x < self.right
            and self.x < other.right
            and other.y < self.bottom
            and self.y < other.bottom
        )

    def scale(self, factor: float) -> Rectangle:
        return Rectangle(
            x=round(self.x * factor),
            y=round(self.y * factor),
            width=round(self.width * factor),
            height=round(self.height * factor),
        )

    def inverse_scale(self, factor: float) -> Rectangle:
        return Rectangle(
            x=round(self.x / factor),
            y=round(self.y / factor),
            width=round(self.width / factor),
            height=round(self.height / factor),
        )

    def clamp(self, width: int, height: int) -> Rectangle:
        """Shift and shrink the rectangle so it fits inside a width x height image."""
        new_w = max(0, min(self.width, width))
        new_h = max(0, min(self.height, height))
        new_x = max(0, min(self.x, width - new_w))
        new_y = max(0, min(self.y, height - new_h))
        return Rectangle(new_x, new_y, new_w, new_h)

    def to_box(self) -> tuple[int, int, int, int]:
        """Return the Pillow crop box ``(left, upper, right, lower)``."""
        return (self.x, self.y, self.right, self.bottom)


@dataclass(frozen=True)
class BoostArea:
    """Caller-declared region of guaranteed importance."""
    area: Rectangle
    weight: float

    def scale(self, factor: float) -> BoostArea:
        return BoostArea(area=self.area.scale(factor), weight=self.weight)


@dataclass(frozen=True)
class Score:
    """Weighted salience sums of one candidate."""
    detail: float = 0.0
    skin: float = 0.0
    saturation: float = 0.0
    boost: float = 0.0
    penalty: float = 0.0
    total: float = 0.0


@dataclass(frozen=True)
class Crop:
    """A scored candidate rectangle."""
    area: Rectangle
    score: Score = field(default_factory=Score)

    def inverse_scale(self, factor: float) -> Crop:
        return Crop(area=self.area.inverse_scale(factor), score=self.score)


@dataclass
class DebugInfo:
    """Diagnostic payload attached to a result when ``Options.debug`` is set."""
    output: PixelBuffer
    options: Options
    crops: list[Crop] = field(default_factory=list)
    source_size: tuple[int, int] = (0, 0)
    parameters: CropParameters | None = None

    def output_image(self) -> PILImage.Image:
        """Return the analysis visualization as an RGBA Pillow image.

        Skin is drawn in red, detail in green, saturation in blue and boost
        in alpha.
        """
        return self.output.to_pil()

    def encode_png(self) -> bytes:
        buffer = io.BytesIO()
        self.output_image().save(buffer, format="PNG")
        return buffer.getvalue()

    def top_crops(self, count: int) -> list[Crop]:
        """Return the ``count`` best candidates, earlier candidates first on ties."""
        ranked = sorted(self.crops, key=lambda c: c.score.total, reverse=True)
        return ranked[:max(0, count)]


@dataclass
class CropResult:
    """Final result of one crop call."""
    area: Rectangle
    debug_info: DebugInfo | None = None
