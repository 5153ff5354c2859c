"""sRGB to linear sRGB color conversion."""

import torch
from torch import Tensor

from torchgamut.color._constants import (
    SRGB_ENCODED_DIVISOR,
    SRGB_ENCODED_OFFSET,
    SRGB_ENCODED_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
)


def srgb_to_srgb_linear(input: Tensor) -> Tensor:
    r"""Convert sRGB to linear sRGB (gamma decode).

    Applies the IEC 61966-2-1 electro-optical transfer function element-wise.
    Display P3 uses the same curve, so this function linearizes P3 channels
    as well.

    Mathematical Definition
    -----------------------
    For each input value :math:`x`:

    .. math::
        f(x) = \begin{cases}
            \frac{x}{12.92} & \text{if } x \leq 0.04045 \\
            \left(\frac{x + 0.055}{1.055}\right)^{2.4} & \text{otherwise}
        \end{cases}

    Negative inputs fall in the linear segment, so no fractional power of a
    negative base is ever taken. The power segment is evaluated on
    ``max(x, 0.04045)``, which keeps both its value and its gradient finite
    where it is not selected.

    Parameters
    ----------
    input : Tensor
        Gamma-encoded channel values. Any shape, e.g. ``(3,)`` for a single
        RGB pixel or ``(B, H, W, 3)`` for a batch of images.

    Returns
    -------
    Tensor
        Linear-light channel values with the same shape and dtype as input.

    Examples
    --------
    >>> srgb = torch.tensor([0.2, 0.5, 0.8])
    >>> torchgamut.color.srgb_to_srgb_linear(srgb)
    tensor([0.0331, 0.2140, 0.6038])

    See Also
    --------
    srgb_linear_to_srgb : Inverse conversion.
    extended_srgb_to_srgb_linear : Odd-symmetric variant for negative values.

    References
    ----------
    .. [1] IEC 61966-2-1:1999, "Multimedia systems and equipment - Colour
           measurement and management - Part 2-1: Colour management - Default
           RGB colour space - sRGB"
    """
    linear = input / SRGB_LINEAR_SLOPE

    encoded = torch.clamp(input, min=SRGB_ENCODED_THRESHOLD)
    gamma = torch.pow(
        (encoded + SRGB_ENCODED_OFFSET) / SRGB_ENCODED_DIVISOR,
        SRGB_GAMMA,
    )

    return torch.where(input <= SRGB_ENCODED_THRESHOLD, linear, gamma)
