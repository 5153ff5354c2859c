"""Color values tagged with a color space."""

import warnings
from dataclasses import dataclass
from typing import Union

import torch
from torch import Tensor

from torchgamut.color._color_space import ColorSpace

_ARGB_SHIFTS = (24, 16, 8, 0)


@dataclass(frozen=True, eq=False)
class Color:
    """ARGB color values tagged with the color space they are expressed in.

    A ``Color`` is never modified in place: conversions and the ``with_*``
    methods return new instances.

    Parameters
    ----------
    data : Tensor, shape (..., 4)
        Channel values in the order alpha, red, green, blue. Leading
        dimensions are batch dimensions, e.g. ``(H, W, 4)`` for an image.
        Values outside [0, 1] are accepted as-is. Integer tensors are
        converted to the default floating point dtype.
    color_space : ColorSpace or str, optional
        Color space of ``data``. Default: ``ColorSpace.SRGB``.

    Examples
    --------
    >>> color = Color(torch.tensor([1.0, 1.0, 0.0, 0.0]), "display_p3")
    >>> color.with_color_space("extended_srgb").red
    tensor(1.0931)
    """

    data: Tensor
    color_space: ColorSpace = ColorSpace.SRGB

    def __post_init__(self):
        data = self.data
        if not isinstance(data, Tensor):
            data = torch.as_tensor(data, dtype=torch.get_default_dtype())
            object.__setattr__(self, "data", data)
        elif not data.is_floating_point():
            data = data.to(torch.get_default_dtype())
            object.__setattr__(self, "data", data)

        if data.dim() == 0 or data.shape[-1] != 4:
            size = None if data.dim() == 0 else data.shape[-1]
            raise ValueError(
                f"Color: data must have last dimension 4, got {size}"
            )

        object.__setattr__(self, "color_space", ColorSpace(self.color_space))

    @property
    def alpha(self) -> Tensor:
        return self.data[..., 0]

    @property
    def red(self) -> Tensor:
        return self.data[..., 1]

    @property
    def green(self) -> Tensor:
        return self.data[..., 2]

    @property
    def blue(self) -> Tensor:
        return self.data[..., 3]

    @property
    def rgb(self) -> Tensor:
        """Red, green and blue channels, shape ``(..., 3)``."""
        return self.data[..., 1:]

    @classmethod
    def from_rgb(
        cls,
        rgb: Tensor,
        alpha: Union[float, Tensor] = 1.0,
        color_space: Union[ColorSpace, str] = ColorSpace.SRGB,
    ) -> "Color":
        """Build a color from ``(..., 3)`` RGB values and an alpha.

        ``alpha`` is broadcast against the batch shape of ``rgb``.
        """
        if rgb.shape[-1] != 3:
            raise ValueError(
                f"Color.from_rgb: rgb must have last dimension 3, "
                f"got {rgb.shape[-1]}"
            )

        alpha = torch.as_tensor(alpha, dtype=rgb.dtype, device=rgb.device)
        alpha = torch.broadcast_to(alpha, rgb.shape[:-1])

        return cls(torch.cat([alpha.unsqueeze(-1), rgb], dim=-1), color_space)

    @classmethod
    def from_argb(
        cls,
        value: Union[int, Tensor],
        color_space: Union[ColorSpace, str] = ColorSpace.SRGB,
        *,
        dtype: torch.dtype = torch.float32,
    ) -> "Color":
        """Build a color from packed 32-bit ``0xAARRGGBB`` integers.

        Each 8-bit channel is divided by 255.

        Parameters
        ----------
        value : int or Tensor
            Packed color, or an integer tensor of packed colors of any shape.
        color_space : ColorSpace or str, optional
            Tag of the resulting color. Default: ``ColorSpace.SRGB``.
        dtype : torch.dtype, optional
            Floating point dtype of the channels. Default: ``torch.float32``.

        Examples
        --------
        >>> Color.from_argb(0xFF00FF00).data
        tensor([1., 0., 1., 0.])
        """
        argb = torch.as_tensor(value, dtype=torch.int64)
        shifts = torch.tensor(_ARGB_SHIFTS, device=argb.device)

        channels = torch.bitwise_and(
            torch.bitwise_right_shift(argb.unsqueeze(-1), shifts), 0xFF
        )

        return cls(channels.to(dtype) / 255.0, color_space)

    def to_argb(self) -> Tensor:
        """Pack the color into ``0xAARRGGBB`` integers.

        Channels are clamped to [0, 1], scaled by 255 and rounded. The tag is
        not changed; convert first to pack the color in another space.

        Returns
        -------
        Tensor
            ``int64`` tensor with the batch shape of ``data``.
        """
        if not self.data.is_meta and not torch.compiler.is_compiling():
            invalid = (self.data < 0.0) | (self.data > 1.0)
            if bool((invalid | torch.isnan(self.data)).any()):
                warnings.warn(
                    "to_argb: NaN or channel values outside [0, 1] are "
                    "clamped when packed to 8 bits",
                    RuntimeWarning,
                    stacklevel=2,
                )

        # NaN packs as 0.
        channels = torch.nan_to_num(self.data, nan=0.0)
        channels = torch.round(torch.clamp(channels, 0.0, 1.0) * 255.0)
        channels = channels.to(torch.int64)
        shifts = torch.tensor(_ARGB_SHIFTS, device=channels.device)

        return torch.bitwise_left_shift(channels, shifts).sum(dim=-1)

    def with_alpha(self, alpha: Union[float, Tensor]) -> "Color":
        """Return a copy with alpha replaced and the same color space."""
        return Color.from_rgb(self.rgb, alpha, self.color_space)

    def with_color_space(
        self,
        color_space: Union[ColorSpace, str],
    ) -> "Color":
        """Convert to ``color_space``. See :func:`convert_color_space`."""
        from torchgamut.color._convert_color_space import convert_color_space

        return convert_color_space(self, color_space)

    def is_opaque(self) -> Tensor:
        return self.alpha >= 1.0

    def is_transparent(self) -> Tensor:
        return self.alpha <= 0.0
