"""Exceptions for color space conversion."""

from torchgamut.color._color_space import ColorSpace


class ColorSpaceConversionError(Exception):
    """Base exception for all color space conversion errors."""

    pass


class UnsupportedColorSpaceConversionError(
    ColorSpaceConversionError, NotImplementedError
):
    """Raised for a conversion that has no defined gamut-mapping policy.

    Converting into :attr:`ColorSpace.DISPLAY_P3` from a narrower space would
    require choosing a gamut-mapping intent, so it is refused rather than
    approximated.
    """

    def __init__(self, source: ColorSpace, target: ColorSpace):
        self.source = source
        self.target = target
        super().__init__(
            f"conversion from {source.value} to {target.value} is not "
            f"implemented"
        )
