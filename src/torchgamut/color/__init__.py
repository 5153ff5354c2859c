"""Color space conversion functions."""

from torchgamut.color._color import Color
from torchgamut.color._color_space import ColorSpace
from torchgamut.color._convert_color_space import convert_color_space
from torchgamut.color._display_p3_linear_to_srgb_linear import (
    display_p3_linear_to_srgb_linear,
)
from torchgamut.color._display_p3_to_extended_srgb import (
    display_p3_to_extended_srgb,
)
from torchgamut.color._exceptions import (
    ColorSpaceConversionError,
    UnsupportedColorSpaceConversionError,
)
from torchgamut.color._extended_srgb_to_srgb_linear import (
    extended_srgb_to_srgb_linear,
)
from torchgamut.color._srgb_linear_to_extended_srgb import (
    srgb_linear_to_extended_srgb,
)
from torchgamut.color._srgb_linear_to_srgb import srgb_linear_to_srgb
from torchgamut.color._srgb_to_srgb_linear import srgb_to_srgb_linear

__all__ = [
    "Color",
    "ColorSpace",
    "ColorSpaceConversionError",
    "UnsupportedColorSpaceConversionError",
    "convert_color_space",
    "display_p3_linear_to_srgb_linear",
    "display_p3_to_extended_srgb",
    "extended_srgb_to_srgb_linear",
    "srgb_linear_to_extended_srgb",
    "srgb_linear_to_srgb",
    "srgb_to_srgb_linear",
]
