"""A stack of convolution layers, each optionally followed by pooling."""

from __future__ import annotations

import logging

import numpy as np

from bloodcnn.activation import ActivationType
from bloodcnn.convolution import ConvolutionLayer
from bloodcnn.pooling import PoolingLayer, PoolingType

logger = logging.getLogger(__name__)


def _shape_text(array: np.ndarray) -> str:
    return "x".join(str(dim) for dim in array.shape)


class ConvolutionalNeuralNetwork:
    """Convolution layers run in order; the i-th pooling layer follows the i-th convolution."""

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.conv_layers: list[ConvolutionLayer] = []
        self.pool_layers: list[PoolingLayer] = []
        self._rng = rng

    def add_convolution_layer(
        self,
        in_channels: int,
        out_channels: int,
        kernel_size: int,
        activation: ActivationType = ActivationType.RELU,
    ) -> ConvolutionLayer:
        """Append a convolution layer with stride 1 and no padding."""
        layer = ConvolutionLayer(
            in_channels, out_channels, kernel_size, activation, rng=self._rng
        )
        self.conv_layers.append(layer)
        logger.info(
            "Added convolution layer: %d -> %d channels, kernel %dx%d",
            in_channels,
            out_channels,
            kernel_size,
            kernel_size,
        )
        return layer

    def add_pooling_layer(
        self, pool_size: int, pooling_type: PoolingType = PoolingType.MAX
    ) -> PoolingLayer:
        """Append a pooling layer whose stride equals its window size."""
        layer = PoolingLayer(pool_size, pool_size, PoolingType(pooling_type))
        self.pool_layers.append(layer)
        logger.info(
            "Added pooling layer: %dx%d (%s)",
            pool_size,
            pool_size,
            layer.pooling_type.name,
        )
        return layer

    def forward(self, feature_map) -> np.ndarray:
        """Run the feature map through every layer and return the result."""
        output = np.asarray(feature_map, dtype=np.float32)
        for index, conv in enumerate(self.conv_layers):
            number = index + 1
            logger.info("Processing convolution layer %d...", number)
            logger.info("Input: %s", _shape_text(output))
            output = conv.forward(output)
            logger.info("Output of conv%d: %s", number, _shape_text(output))
            if index < len(self.pool_layers):
                logger.info("Applying pooling...")
                output = self.pool_layers[index].forward(output)
                logger.info("Output of pooling: %s", _shape_text(output))
        return output

    def architecture(self) -> str:
        """Multi-line description of the layers in the network."""
        lines = [
            "=== CNN architecture ===",
            f"Convolution layers: {len(self.conv_layers)}",
            f"Pooling layers: {len(self.pool_layers)}",
        ]
        lines.extend(
            f"Conv{number}: {conv.kernel_info()}"
            for number, conv in enumerate(self.conv_layers, start=1)
        )
        return "\n".join(lines)