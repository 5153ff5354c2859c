"""Linear sRGB to sRGB color conversion."""

import torch
from torch import Tensor

from torchgamut.color._constants import (
    SRGB_ENCODED_DIVISOR,
    SRGB_ENCODED_OFFSET,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_LINEAR_THRESHOLD,
)


def srgb_linear_to_srgb(input: Tensor) -> Tensor:
    r"""Convert linear sRGB to sRGB (gamma encode).

    Applies the IEC 61966-2-1 opto-electronic transfer function element-wise.

    Mathematical Definition
    -----------------------
    For each input value :math:`x`:

    .. math::
        f(x) = \begin{cases}
            12.92 \cdot x & \text{if } x \leq 0.0031308 \\
            1.055 \cdot x^{1/2.4} - 0.055 & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    input : Tensor
        Linear-light channel values. Any shape.

    Returns
    -------
    Tensor
        Gamma-encoded channel values with the same shape and dtype as input.

    Examples
    --------
    >>> linear = torch.tensor([0.0331, 0.2140, 0.6038])
    >>> torchgamut.color.srgb_linear_to_srgb(linear)
    tensor([0.2000, 0.5000, 0.8000])

    Notes
    -----
    - The function is continuous at the threshold ``0.0031308``.
    - The power segment is evaluated on ``max(x, 0.0031308)``; its gradient
      at zero would otherwise be infinite.

    See Also
    --------
    srgb_to_srgb_linear : Inverse conversion.
    srgb_linear_to_extended_srgb : Odd-symmetric variant for negative values.
    """
    linear = input * SRGB_LINEAR_SLOPE

    encoded = torch.clamp(input, min=SRGB_LINEAR_THRESHOLD)
    gamma = (
        SRGB_ENCODED_DIVISOR * torch.pow(encoded, 1.0 / SRGB_GAMMA)
        - SRGB_ENCODED_OFFSET
    )

    return torch.where(input <= SRGB_LINEAR_THRESHOLD, linear, gamma)
