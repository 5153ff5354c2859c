"""Hypothesis strategies for color space testing."""

from ._batch_shapes import batch_shapes
from ._channel_values import channel_values
from ._color_spaces import color_spaces, supported_conversions
from ._colors import colors
from ._rgb_tensors import rgb_tensors

__all__ = [
    # Numeric strategies
    "channel_values",
    # Tensor strategies
    "batch_shapes",
    "rgb_tensors",
    # Color strategies
    "color_spaces",
    "supported_conversions",
    "colors",
]
