"""Testing utilities for torchgamut.

Hypothesis strategies for channel values, RGB tensors and tagged colors live
in :mod:`torchgamut.testing.strategies`.
"""

from . import strategies

__all__ = [
    "strategies",
]
