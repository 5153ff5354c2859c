"""Display P3 to extended sRGB color conversion."""

import torch
from torch import Tensor

from torchgamut.color._display_p3_linear_to_srgb_linear import (
    display_p3_linear_to_srgb_linear,
)
from torchgamut.color._extended_srgb_to_srgb_linear import (
    extended_srgb_to_srgb_linear,
)
from torchgamut.color._srgb_linear_to_extended_srgb import (
    srgb_linear_to_extended_srgb,
)


def display_p3_to_extended_srgb(input: Tensor) -> Tensor:
    r"""Convert gamma-encoded Display P3 to gamma-encoded extended sRGB.

    The conversion linearizes each channel, maps the primaries with
    :func:`display_p3_linear_to_srgb_linear` and re-encodes each channel:

    .. math::
        C_{\text{sRGB}} = \mathrm{encode}_{\text{ext}}\left(
            M \, \mathrm{decode}_{\text{ext}}(C_{\text{P3}})
        \right)

    Saturated P3 colors land outside [0, 1]; the extended range keeps them
    instead of clipping.

    Parameters
    ----------
    input : Tensor, shape (..., 3)
        Gamma-encoded Display P3 RGB values.

    Returns
    -------
    Tensor, shape (..., 3)
        Gamma-encoded extended sRGB values, same dtype as input.

    Examples
    --------
    >>> p3_red = torch.tensor([1.0, 0.0, 0.0])
    >>> torchgamut.color.display_p3_to_extended_srgb(p3_red)
    tensor([ 1.0931, -0.2267, -0.1501])

    Notes
    -----
    The arithmetic is carried out in float64 and the result cast back to the
    input dtype, so float32 and half-precision inputs round only once.
    """
    if input.shape[-1] != 3:
        raise ValueError(
            f"display_p3_to_extended_srgb: input must have last dimension 3, "
            f"got {input.shape[-1]}"
        )

    dtype = input.dtype
    if not input.is_floating_point():
        dtype = torch.get_default_dtype()

    linear = extended_srgb_to_srgb_linear(input.to(torch.float64))

    linear = display_p3_linear_to_srgb_linear(linear)

    return srgb_linear_to_extended_srgb(linear).to(dtype)
