"""Forward pass of a small convolutional neural network for Blood-MNIST images."""

__version__ = "0.1.0"