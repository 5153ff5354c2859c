"""Extended sRGB to linear sRGB color conversion."""

import torch
from torch import Tensor

from torchgamut.color._srgb_to_srgb_linear import srgb_to_srgb_linear


def extended_srgb_to_srgb_linear(input: Tensor) -> Tensor:
    r"""Convert extended sRGB to linear sRGB.

    Extends :func:`srgb_to_srgb_linear` to negative values by odd symmetry,
    so out-of-gamut channels linearize consistently in sign.

    .. math::
        f(x) = \operatorname{sign}(x) \, \mathrm{decode}(|x|)

    The decode curve is only ever evaluated on non-negative arguments, which
    makes the result exactly antisymmetric: ``f(-x) == -f(x)``.

    Parameters
    ----------
    input : Tensor
        Gamma-encoded extended-range channel values. Any shape.

    Returns
    -------
    Tensor
        Linear-light channel values with the same shape and dtype as input.

    See Also
    --------
    srgb_linear_to_extended_srgb : Inverse conversion.
    """
    negative = input < 0

    magnitude = srgb_to_srgb_linear(torch.where(negative, -input, input))

    return torch.where(negative, -magnitude, magnitude)
