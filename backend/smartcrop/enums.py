"""Channel layouts for pixel and analysis buffers."""

from __future__ import annotations

from enum import Enum, IntEnum


class ChannelOrder(Enum):
    """Byte order of a 4-channel pixel."""
    RGBA = "rgba"
    BGRA = "bgra"

    @property
    def red_index(self) -> int:
        return 0 if self is ChannelOrder.RGBA else 2

    @property
    def green_index(self) -> int:
        return 1

    @property
    def blue_index(self) -> int:
        return 2 if self is ChannelOrder.RGBA else 0

    @property
    def alpha_index(self) -> int:
        return 3


class AnalysisChannel(IntEnum):
    """Channels of the salience (analysis) buffer."""
    DETAIL = 0
    SKIN = 1
    SATURATION = 2
    BOOST = 3
