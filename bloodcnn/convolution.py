"""Two-dimensional convolution layer with a built-in activation."""

from __future__ import annotations

import numpy as np

from bloodcnn.activation import ActivationType, apply_to_feature_map
from bloodcnn.kernel import ConvolutionKernel


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _as_feature_map(feature_map) -> np.ndarray:
    array = np.asarray(feature_map, dtype=np.float32)
    if array.ndim != 3 or 0 in array.shape:
        raise ValueError("feature map must be a non-empty channels x height x width array")
    return array


class ConvolutionLayer:
    """A convolution with zero padding and stride, followed by an activation function."""

    def __init__(
        self,
        in_channels: int,
        out_channels: int,
        kernel_size: int,
        activation: ActivationType = ActivationType.RELU,
        stride: int = 1,
        padding: int = 0,
        rng: np.random.Generator | None = None,
    ) -> None:
        if stride < 1:
            raise ValueError(f"stride must be at least 1, got {stride}")
        if padding < 0:
            raise ValueError(f"padding must not be negative, got {padding}")
        self.kernel = ConvolutionKernel(in_channels, out_channels, kernel_size, rng=rng)
        self.activation = ActivationType(activation)
        self.stride = stride
        self.padding = padding

    def output_size(self, height: int, width: int) -> tuple[int, int]:
        """Spatial size of the output for an input of the given size."""
        size = self.kernel.kernel_size
        out_height = _trunc_div(height + 2 * self.padding - size, self.stride) + 1
        out_width = _trunc_div(width + 2 * self.padding - size, self.stride) + 1
        return out_height, out_width

    def forward(self, feature_map) -> np.ndarray:
        """Convolve the feature map, add biases and apply the activation."""
        array = _as_feature_map(feature_map)
        channels, height, width = array.shape
        if channels > self.kernel.in_channels:
            raise ValueError(
                f"input has {channels} channels, kernel accepts at most {self.kernel.in_channels}"
            )
        size = self.kernel.kernel_size
        out_height, out_width = self.output_size(height, width)
        if out_height <= 0 or out_width <= 0:
            raise ValueError(
                f"invalid output size: input {height}x{width}, kernel {size}x{size}, "
                f"output {out_height}x{out_width}"
            )

        stride, pad = self.stride, self.padding
        span_height = stride * (out_height - 1) + 1
        span_width = stride * (out_width - 1) + 1
        # Extra zeros stand in for positions that fall outside the input.
        extra_height = max(0, span_height - 1 + size - (height + 2 * pad))
        extra_width = max(0, span_width - 1 + size - (width + 2 * pad))
        padded = np.pad(array, ((0, 0), (pad, pad + extra_height), (pad, pad + extra_width)))

        weights = self.kernel.weights[:, :channels]
        output = np.repeat(
            self.kernel.bias[:, np.newaxis, np.newaxis], out_height, axis=1
        ).repeat(out_width, axis=2).astype(np.float32)
        for ki in range(size):
            for kj in range(size):
                patch = padded[:, ki : ki + span_height : stride, kj : kj + span_width : stride]
                output += np.tensordot(weights[:, :, ki, kj], patch, axes=(1, 0))

        return apply_to_feature_map(output, self.activation)

    def kernel_info(self) -> str:
        """One-line description of the kernel's channels and size."""
        kernel = self.kernel
        return (
            f"Kernel: {kernel.in_channels} -> {kernel.out_channels} channels, "
            f"size: {kernel.kernel_size}x{kernel.kernel_size}"
        )