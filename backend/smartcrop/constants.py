"""Shared constants for smartcrop heuristics."""

from __future__ import annotations

# Luma weights applied to (red, green, blue). The red/blue weights are swapped
# relative to Rec. 709 and must stay that way.
LUMA_RED = 0.0722
LUMA_GREEN = 0.7152
LUMA_BLUE = 0.5126

# Default reference skin colour (red, green, blue)
DEFAULT_SKIN_COLOR = (0.78, 0.57, 0.44)

# Downsample blend: output = mean * MEAN_WEIGHT + max * MAX_WEIGHT
DETAIL_MEAN_WEIGHT = 0.7
DETAIL_MAX_WEIGHT = 0.3
SKIN_MEAN_WEIGHT = 0.5
SKIN_MAX_WEIGHT = 0.5

# Importance model
RADIAL_PEAK = 1.41
THIRDS_OFFSET = 0.5
THIRDS_GAIN = 1.2
THIRDS_SHARPNESS = 16.0

# Number of channels in every pixel and analysis buffer
CHANNELS = 4
