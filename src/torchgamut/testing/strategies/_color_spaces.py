import hypothesis.strategies

from torchgamut.color import ColorSpace

color_spaces = hypothesis.strategies.sampled_from(list(ColorSpace))

# (source, target) pairs that convert without raising.
supported_conversions = hypothesis.strategies.sampled_from(
    [
        (source, target)
        for source in ColorSpace
        for target in ColorSpace
        if target is not ColorSpace.DISPLAY_P3
        or source is ColorSpace.DISPLAY_P3
    ]
)
