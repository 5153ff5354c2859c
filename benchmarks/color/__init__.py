"""Benchmarks for color space conversion.

Times torchgamut conversions on images against a NumPy float64 reference.
"""

from .bench_color_space_conversion import BenchColorSpaceConversion

__all__ = [
    "BenchColorSpaceConversion",
]
