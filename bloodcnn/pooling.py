"""Spatial pooling over channels x height x width feature maps."""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class PoolingType(enum.Enum):
    """How values in a pooling window are combined."""

    MAX = "max"
    MIN = "min"
    AVERAGE = "average"


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _as_feature_map(feature_map) -> np.ndarray:
    array = np.asarray(feature_map, dtype=np.float32)
    if array.ndim != 3 or 0 in array.shape:
        raise ValueError("feature map must be a non-empty channels x height x width array")
    return array


@dataclass(frozen=True)
class PoolingLayer:
    """Pooling with a square window moved by a fixed stride, without padding."""

    pool_size: int
    stride: int
    pooling_type: PoolingType = PoolingType.MAX

    def __post_init__(self) -> None:
        if self.pool_size < 1:
            raise ValueError(f"pool_size must be at least 1, got {self.pool_size}")
        if self.stride < 1:
            raise ValueError(f"stride must be at least 1, got {self.stride}")
        object.__setattr__(self, "pooling_type", PoolingType(self.pooling_type))

    def _reduce(self, window: np.ndarray) -> np.ndarray:
        if self.pooling_type is PoolingType.MAX:
            return window.max(axis=(1, 2))
        if self.pooling_type is PoolingType.MIN:
            return window.min(axis=(1, 2))
        # Clipped windows still divide by the full window area.
        return window.sum(axis=(1, 2), dtype=np.float32) / np.float32(self.pool_size**2)

    def forward(self, feature_map) -> np.ndarray:
        """Pool every channel and return the new feature map."""
        array = _as_feature_map(feature_map)
        channels, height, width = array.shape
        out_height = _trunc_div(height - self.pool_size, self.stride) + 1
        out_width = _trunc_div(width - self.pool_size, self.stride) + 1
        if out_height <= 0 or out_width <= 0:
            raise ValueError(
                f"pooling window {self.pool_size}x{self.pool_size} does not fit "
                f"input {height}x{width}"
            )
        output = np.empty((channels, out_height, out_width), dtype=np.float32)
        for i in range(out_height):
            top = i * self.stride
            for j in range(out_width):
                left = j * self.stride
                window = array[:, top : top + self.pool_size, left : left + self.pool_size]
                output[:, i, j] = self._reduce(window)
        return output