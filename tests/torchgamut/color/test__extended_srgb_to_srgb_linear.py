"""Tests for extended_srgb_to_srgb_linear color conversion."""

import hypothesis
import torch
from torch.autograd import gradcheck

from torchgamut.color import (
    extended_srgb_to_srgb_linear,
    srgb_linear_to_extended_srgb,
    srgb_to_srgb_linear,
)
from torchgamut.testing import strategies


class TestExtendedSrgbToSrgbLinearKnownValues:
    """Tests for known conversion values."""

    def test_matches_decode_for_non_negative(self):
        srgb = torch.linspace(0.0, 2.0, 201, dtype=torch.float64)
        assert torch.equal(
            extended_srgb_to_srgb_linear(srgb), srgb_to_srgb_linear(srgb)
        )

    def test_negative_gamma_region(self):
        """-0.5 decodes to -(((0.5 + 0.055) / 1.055) ** 2.4)."""
        srgb = torch.tensor([-0.5], dtype=torch.float64)
        linear = extended_srgb_to_srgb_linear(srgb)
        expected = -(((0.5 + 0.055) / 1.055) ** 2.4)
        assert abs(linear[0].item() - expected) < 1e-12

    def test_negative_linear_region(self):
        srgb = torch.tensor([-0.02], dtype=torch.float64)
        linear = extended_srgb_to_srgb_linear(srgb)
        assert linear[0].item() == -(0.02 / 12.92)

    def test_no_nan_for_negative_input(self):
        srgb = torch.tensor([-10.0, -1.0, -0.3, -1e-9], dtype=torch.float64)
        assert not torch.isnan(extended_srgb_to_srgb_linear(srgb)).any()

    def test_zero(self):
        srgb = torch.tensor([0.0, -0.0], dtype=torch.float64)
        assert (extended_srgb_to_srgb_linear(srgb) == 0.0).all()


class TestExtendedSrgbToSrgbLinearSymmetry:
    """Tests for odd symmetry."""

    def test_antisymmetric_grid(self):
        srgb = torch.linspace(-3.0, 3.0, 601, dtype=torch.float64)
        assert torch.equal(
            extended_srgb_to_srgb_linear(-srgb),
            -extended_srgb_to_srgb_linear(srgb),
        )

    @hypothesis.given(
        strategies.rgb_tensors(
            elements=strategies.channel_values(-100.0, 100.0)
        )
    )
    @hypothesis.settings(max_examples=50, deadline=None)
    def test_antisymmetric(self, srgb):
        assert torch.equal(
            extended_srgb_to_srgb_linear(-srgb),
            -extended_srgb_to_srgb_linear(srgb),
        )


class TestExtendedSrgbToSrgbLinearRoundTrip:
    """Tests for round-trip conversion."""

    def test_round_trip_extended_range(self):
        srgb = torch.linspace(-2.0, 2.0, 401, dtype=torch.float64)
        recovered = srgb_linear_to_extended_srgb(
            extended_srgb_to_srgb_linear(srgb)
        )
        assert torch.allclose(srgb, recovered, atol=1e-6)


class TestExtendedSrgbToSrgbLinearGradients:
    """Tests for gradient computation."""

    def test_gradcheck_negative(self):
        srgb = torch.tensor(
            [-0.9, -0.5, -0.1, -0.01], dtype=torch.float64, requires_grad=True
        )
        assert gradcheck(
            extended_srgb_to_srgb_linear, (srgb,), eps=1e-6, atol=1e-4
        )

    def test_gradcheck_mixed(self):
        srgb = torch.tensor(
            [-0.7, -0.02, 0.02, 0.7, 1.3],
            dtype=torch.float64,
            requires_grad=True,
        )
        assert gradcheck(
            extended_srgb_to_srgb_linear, (srgb,), eps=1e-6, atol=1e-4
        )

    def test_gradient_is_even(self):
        """The derivative of an odd function is even."""
        positive = torch.tensor([0.5], dtype=torch.float64, requires_grad=True)
        negative = torch.tensor([-0.5], dtype=torch.float64, requires_grad=True)
        extended_srgb_to_srgb_linear(positive).sum().backward()
        extended_srgb_to_srgb_linear(negative).sum().backward()
        assert torch.equal(positive.grad, negative.grad)


class TestExtendedSrgbToSrgbLinearDtypes:
    """Tests for different data types."""

    def test_float32(self):
        srgb = torch.randn(10, dtype=torch.float32)
        assert extended_srgb_to_srgb_linear(srgb).dtype == torch.float32

    def test_float64(self):
        srgb = torch.randn(10, dtype=torch.float64)
        assert extended_srgb_to_srgb_linear(srgb).dtype == torch.float64
