"""torchgamut: color space conversion for PyTorch tensors."""

from . import color

__all__ = [
    "color",
]

__version__ = "0.1.0"
