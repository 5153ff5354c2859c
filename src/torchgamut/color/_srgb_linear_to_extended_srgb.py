"""Linear sRGB to extended sRGB color conversion."""

import torch
from torch import Tensor

from torchgamut.color._srgb_linear_to_srgb import srgb_linear_to_srgb


def srgb_linear_to_extended_srgb(input: Tensor) -> Tensor:
    r"""Convert linear sRGB to extended sRGB.

    Odd-symmetric extension of :func:`srgb_linear_to_srgb`:

    .. math::
        f(x) = \operatorname{sign}(x) \, \mathrm{encode}(|x|)

    Parameters
    ----------
    input : Tensor
        Linear-light channel values, possibly negative or above 1. Any shape.

    Returns
    -------
    Tensor
        Gamma-encoded extended-range values with the same shape as input.

    See Also
    --------
    extended_srgb_to_srgb_linear : Inverse conversion.
    """
    negative = input < 0

    magnitude = srgb_linear_to_srgb(torch.where(negative, -input, input))

    return torch.where(negative, -magnitude, magnitude)
