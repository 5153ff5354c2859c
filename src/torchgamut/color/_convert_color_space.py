"""Conversion between tagged color spaces."""

from typing import Callable, Dict, Tuple, Union

import torch

from torchgamut.color._color import Color
from torchgamut.color._color_space import ColorSpace
from torchgamut.color._display_p3_to_extended_srgb import (
    display_p3_to_extended_srgb,
)
from torchgamut.color._exceptions import UnsupportedColorSpaceConversionError


def _identity(color: Color) -> Color:
    return color


def _srgb_to_extended_srgb(color: Color) -> Color:
    return Color(color.data, ColorSpace.EXTENDED_SRGB)


def _extended_srgb_to_srgb(color: Color) -> Color:
    rgb = torch.clamp(color.rgb, 0.0, 1.0)

    return Color(
        torch.cat([color.data[..., :1], rgb], dim=-1),
        ColorSpace.SRGB,
    )


def _display_p3_to_extended_srgb(color: Color) -> Color:
    rgb = display_p3_to_extended_srgb(color.rgb)

    return Color(
        torch.cat([color.data[..., :1], rgb], dim=-1),
        ColorSpace.EXTENDED_SRGB,
    )


def _display_p3_to_srgb(color: Color) -> Color:
    return convert_color_space(
        _display_p3_to_extended_srgb(color),
        ColorSpace.SRGB,
    )


def _unsupported(color: Color) -> Color:
    raise UnsupportedColorSpaceConversionError(
        color.color_space, ColorSpace.DISPLAY_P3
    )


_CONVERSIONS: Dict[Tuple[ColorSpace, ColorSpace], Callable[[Color], Color]] = {
    (ColorSpace.SRGB, ColorSpace.SRGB): _identity,
    (ColorSpace.SRGB, ColorSpace.EXTENDED_SRGB): _srgb_to_extended_srgb,
    (ColorSpace.SRGB, ColorSpace.DISPLAY_P3): _unsupported,
    (ColorSpace.EXTENDED_SRGB, ColorSpace.SRGB): _extended_srgb_to_srgb,
    (ColorSpace.EXTENDED_SRGB, ColorSpace.EXTENDED_SRGB): _identity,
    (ColorSpace.EXTENDED_SRGB, ColorSpace.DISPLAY_P3): _unsupported,
    (ColorSpace.DISPLAY_P3, ColorSpace.SRGB): _display_p3_to_srgb,
    (ColorSpace.DISPLAY_P3, ColorSpace.EXTENDED_SRGB): (
        _display_p3_to_extended_srgb
    ),
    (ColorSpace.DISPLAY_P3, ColorSpace.DISPLAY_P3): _identity,
}


def convert_color_space(
    color: Color,
    color_space: Union[ColorSpace, str],
) -> Color:
    r"""Convert a color to another color space.

    Only the red, green and blue channels are transformed; alpha is copied
    unchanged by every conversion.

    ============== ================================ =============== ===========
    From \ To      SRGB                             EXTENDED_SRGB   DISPLAY_P3
    ============== ================================ =============== ===========
    SRGB           identity                         re-tag          unsupported
    EXTENDED_SRGB  clamp RGB to [0, 1]              identity        unsupported
    DISPLAY_P3     to EXTENDED_SRGB, then to SRGB   decode, matrix, identity
                                                    encode
    ============== ================================ =============== ===========

    Parameters
    ----------
    color : Color
        Color to convert.
    color_space : ColorSpace or str
        Target color space.

    Returns
    -------
    Color
        Color tagged with ``color_space``. Identity conversions return
        ``color`` itself.

    Raises
    ------
    UnsupportedColorSpaceConversionError
        If the target is ``DISPLAY_P3`` and the source is not. Mapping a
        narrower gamut into Display P3 needs a gamut-mapping intent, and none
        is defined.
    ValueError
        If ``color_space`` does not name a color space.

    Examples
    --------
    Clip an extended sRGB color for display:

    >>> color = Color(torch.tensor([1.0, -0.5, 0.5, 1.5]), "extended_srgb")
    >>> convert_color_space(color, "srgb").data
    tensor([1.0000, 0.0000, 0.5000, 1.0000])

    See Also
    --------
    display_p3_to_extended_srgb : The tensor-level P3 conversion.
    """
    target = ColorSpace(color_space)

    return _CONVERSIONS[color.color_space, target](color)
