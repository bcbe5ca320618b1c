"""Weights and biases of a convolution."""

from __future__ import annotations

import numpy as np

WEIGHT_STDDEV = 0.1


class ConvolutionKernel:
    """Convolution weights of shape (out_channels, in_channels, k, k) plus one bias per output channel."""

    def __init__(
        self,
        in_channels: int,
        out_channels: int,
        kernel_size: int,
        rng: np.random.Generator | None = None,
    ) -> None:
        for name, value in (
            ("in_channels", in_channels),
            ("out_channels", out_channels),
            ("kernel_size", kernel_size),
        ):
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        self.in_channels = in_channels
        self.out_channels = out_channels
        self.kernel_size = kernel_size
        self.initialize_weights(rng)

    def initialize_weights(self, rng: np.random.Generator | None = None) -> None:
        """Draw weights and biases from a normal distribution with mean 0 and deviation 0.1."""
        generator = rng if rng is not None else np.random.default_rng()
        shape = (self.out_channels, self.in_channels, self.kernel_size, self.kernel_size)
        self.weights = generator.normal(0.0, WEIGHT_STDDEV, size=shape).astype(np.float32)
        self.bias = generator.normal(0.0, WEIGHT_STDDEV, size=self.out_channels).astype(np.float32)