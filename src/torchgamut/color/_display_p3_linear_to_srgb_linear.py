"""Linear Display P3 to linear sRGB gamut conversion."""

import torch
from torch import Tensor

from torchgamut.color._constants import DISPLAY_P3_LINEAR_TO_SRGB_LINEAR


def display_p3_linear_to_srgb_linear(input: Tensor) -> Tensor:
    r"""Convert linear Display P3 to linear sRGB.

    Applies the fixed 3x3 matrix between the Display P3 and sRGB primaries.
    Both spaces use the D65 white point, so a single linear map relates them.

    Mathematical Definition
    -----------------------
    .. math::
        \begin{bmatrix} R \\ G \\ B \end{bmatrix}_{\text{sRGB}} =
        \begin{bmatrix}
             1.2249401 & -0.2249402 & 0.0 \\
            -0.0420569 &  1.0420571 & 0.0 \\
            -0.0196376 & -0.0786507 & 1.0982884
        \end{bmatrix}
        \begin{bmatrix} R \\ G \\ B \end{bmatrix}_{\text{P3}}

    Parameters
    ----------
    input : Tensor, shape (..., 3)
        Linear-light Display P3 RGB values.

    Returns
    -------
    Tensor, shape (..., 3)
        Linear-light sRGB values. Display P3 primaries lie outside the sRGB
        gamut, so results may be negative or greater than 1.

    Examples
    --------
    >>> rgb = torch.tensor([1.0, 0.0, 0.0])
    >>> torchgamut.color.display_p3_linear_to_srgb_linear(rgb)
    tensor([ 1.2249, -0.0421, -0.0196])
    """
    if input.shape[-1] != 3:
        raise ValueError(
            f"display_p3_linear_to_srgb_linear: input must have last "
            f"dimension 3, got {input.shape[-1]}"
        )

    if not input.is_floating_point():
        input = input.to(torch.get_default_dtype())

    matrix = torch.tensor(
        DISPLAY_P3_LINEAR_TO_SRGB_LINEAR,
        dtype=input.dtype,
        device=input.device,
    )

    return torch.matmul(input, matrix.T)
