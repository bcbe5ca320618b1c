"""Element-wise activation functions applied to feature maps."""

from __future__ import annotations

import enum

import numpy as np

LEAKY_SLOPE = np.float32(0.01)


class ActivationType(enum.Enum):
    """Activation functions a convolution layer can apply."""

    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    LEAKY_RELU = "leaky_relu"


def _activate(values, activation: ActivationType) -> np.ndarray:
    activation = ActivationType(activation)
    values = np.asarray(values, dtype=np.float32)
    zero = np.float32(0.0)
    if activation is ActivationType.RELU:
        # NaN maps to zero, as max(0, NaN) does.
        return np.where(values > zero, values, zero).astype(np.float32)
    if activation is ActivationType.SIGMOID:
        with np.errstate(over="ignore"):
            one = np.float32(1.0)
            return (one / (one + np.exp(-values))).astype(np.float32)
    if activation is ActivationType.TANH:
        return np.tanh(values).astype(np.float32)
    return np.where(values > zero, values, LEAKY_SLOPE * values).astype(np.float32)


def apply(x: float, activation: ActivationType) -> float:
    """Apply an activation function to a single value."""
    return float(_activate(x, activation))


def apply_to_feature_map(feature_map, activation: ActivationType) -> np.ndarray:
    """Return a new float32 array with the activation applied to every element."""
    return _activate(feature_map, activation)