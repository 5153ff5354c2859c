"""Color space tags."""

from enum import Enum


class ColorSpace(str, Enum):
    """Closed set of color spaces a :class:`Color` can be tagged with.

    SRGB
        Standard sRGB. Channels are conventionally in [0, 1] but this is not
        enforced.
    EXTENDED_SRGB
        sRGB primaries and white point with channels allowed outside [0, 1],
        so colors that would clip in SRGB are kept.
    DISPLAY_P3
        Display P3 primaries, D65 white point and the sRGB transfer function.
    """

    SRGB = "srgb"
    EXTENDED_SRGB = "extended_srgb"
    DISPLAY_P3 = "display_p3"
