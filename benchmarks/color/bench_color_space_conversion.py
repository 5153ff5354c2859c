"""Benchmarks for color space conversion.

Compares torchgamut conversions against a NumPy float64 reference of the same
transfer function and gamut matrix, reported as per-image time and pixel
throughput.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchgamut.color import (
    Color,
    ColorSpace,
    convert_color_space,
    display_p3_to_extended_srgb,
    extended_srgb_to_srgb_linear,
)

_MATRIX = np.array(
    [
        [1.2249401, -0.2249402, 0.0],
        [-0.0420569, 1.0420571, 0.0],
        [-0.0196376, -0.0786507, 1.0982884],
    ]
)

_TIME_UNITS = ((1e-6, 1e9, "ns"), (1e-3, 1e6, "us"), (1.0, 1e3, "ms"))


def _numpy_decode(v: np.ndarray) -> np.ndarray:
    a = np.abs(v)
    out = np.where(
        a <= 0.04045,
        a / 12.92,
        ((np.maximum(a, 0.04045) + 0.055) / 1.055) ** 2.4,
    )
    return np.copysign(out, v)


def _numpy_encode(v: np.ndarray) -> np.ndarray:
    a = np.abs(v)
    out = np.where(
        a <= 0.0031308,
        a * 12.92,
        1.055 * np.maximum(a, 0.0031308) ** (1 / 2.4) - 0.055,
    )
    return np.copysign(out, v)


def _numpy_display_p3_to_extended_srgb(rgb: np.ndarray) -> np.ndarray:
    return _numpy_encode(_numpy_decode(rgb) @ _MATRIX.T)


def time_conversion(
    func: Callable,
    image: Any,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
) -> dict[str, float]:
    """Time ``func(image, *args)`` on a ``(H, W, C)`` image.

    Returns
    -------
    dict
        ``seconds`` (median per call), ``spread`` (interquartile range) and
        ``megapixels_per_second``.
    """
    for _ in range(warmup):
        func(image, *args)

    times = np.empty(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        func(image, *args)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times[i] = time.perf_counter() - start

    pixels = image.shape[0] * image.shape[1]
    q1, median, q3 = np.percentile(times, [25, 50, 75])

    return {
        "seconds": median,
        "spread": q3 - q1,
        "megapixels_per_second": pixels / median / 1e6,
    }


def format_seconds(seconds: float) -> str:
    for limit, scale, unit in _TIME_UNITS:
        if seconds < limit:
            return f"{seconds * scale:.3f}{unit}"
    return f"{seconds:.3f}s"


def report(
    name: str,
    torchgamut_result: dict[str, float],
    numpy_result: dict[str, float] | None = None,
) -> None:
    """Print one benchmark row per implementation."""
    print(f"\n{name}")
    print("-" * len(name))

    rows = [("torchgamut", torchgamut_result)]
    if numpy_result is not None:
        rows.append(("numpy", numpy_result))

    for label, result in rows:
        print(
            f"  {label:<11} {format_seconds(result['seconds']):>10} "
            f"(iqr {format_seconds(result['spread'])}) "
            f"{result['megapixels_per_second']:8.1f} MP/s"
        )

    if numpy_result is not None:
        ratio = numpy_result["seconds"] / torchgamut_result["seconds"]
        print(f"  torchgamut / numpy speed: {ratio:.2f}x")


class BenchColorSpaceConversion:
    """Benchmarks for color space conversion functions."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _time(self, func: Callable, image: Any, *args: Any) -> dict[str, float]:
        return time_conversion(
            func,
            image,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
        )

    def bench_extended_srgb_to_srgb_linear(self, size: int = 1024) -> None:
        """Extended transfer function on a (size, size, 3) image."""
        rgb = torch.rand(size, size, 3, dtype=torch.float64) * 2.0 - 0.5

        report(
            f"extended_srgb_to_srgb_linear (size={size})",
            self._time(extended_srgb_to_srgb_linear, rgb),
            self._time(_numpy_decode, rgb.numpy()),
        )

    def bench_display_p3_to_extended_srgb(self, size: int = 1024) -> None:
        """P3 decode, matrix and encode on a (size, size, 3) image."""
        rgb = torch.rand(size, size, 3, dtype=torch.float64)

        report(
            f"display_p3_to_extended_srgb (size={size})",
            self._time(display_p3_to_extended_srgb, rgb),
            self._time(_numpy_display_p3_to_extended_srgb, rgb.numpy()),
        )

    def bench_convert_color_space(self, size: int = 1024) -> None:
        """DISPLAY_P3 -> SRGB through the conversion table."""
        data = torch.rand(size, size, 4)

        def convert(image: torch.Tensor) -> Color:
            return convert_color_space(
                Color(image, ColorSpace.DISPLAY_P3), ColorSpace.SRGB
            )

        report(
            f"convert_color_space display_p3 -> srgb (size={size})",
            self._time(convert, data),
        )

    def check_against_numpy(self, size: int = 256) -> None:
        """Report the largest difference from the NumPy reference."""
        rgb = torch.rand(size, size, 3, dtype=torch.float64) * 1.5 - 0.25
        expected = _numpy_display_p3_to_extended_srgb(rgb.numpy())
        actual = display_p3_to_extended_srgb(rgb).numpy()
        print(
            f"\nmax |torchgamut - numpy|: {np.max(np.abs(actual - expected)):.3e}"
        )

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("Color Space Conversion Benchmarks")
        print("=" * 60)

        self.check_against_numpy()
        self.bench_extended_srgb_to_srgb_linear()
        self.bench_display_p3_to_extended_srgb()
        self.bench_convert_color_space()


if __name__ == "__main__":
    BenchColorSpaceConversion().run_all()
