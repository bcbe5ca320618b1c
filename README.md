# bloodcnn

This package runs the forward pass of a small convolutional neural network. It
is meant for 3×28×28 images such as those in the Blood-MNIST dataset. The
weights are drawn at random, so you can use the network to explore layer shapes
and activations. It does not classify images.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
import numpy as np

from bloodcnn.activation import ActivationType
from bloodcnn.pooling import PoolingType
from bloodcnn.network import ConvolutionalNeuralNetwork
from bloodcnn.image import Image

cnn = ConvolutionalNeuralNetwork(rng=np.random.default_rng(0))
cnn.add_convolution_layer(3, 32, 3, ActivationType.RELU)
cnn.add_pooling_layer(2, PoolingType.MAX)
cnn.add_convolution_layer(32, 64, 3, ActivationType.RELU)
cnn.add_pooling_layer(2, PoolingType.AVERAGE)

image = Image.blank(3, 28, 28)
output = cnn.forward(image.data)
print(output.shape)          # (64, 5, 5)
print(cnn.architecture())
```

Convolution layers run in the order they were added. The i-th pooling layer,
if there is one, is applied right after the i-th convolution. Convolutions
added through the network use stride 1 and no padding. Pooling layers use a
stride equal to their window size. While `forward` runs, the network reports
the shape at each stage through the `bloodcnn.network` logger at INFO level.

## Building blocks

- `bloodcnn.activation`: `ActivationType` (`RELU`, `SIGMOID`, `TANH`,
  `LEAKY_RELU` with slope 0.01). `apply(x, activation)` works on a single
  value. `apply_to_feature_map(feature_map, activation)` returns a new float32
  array.
- `bloodcnn.kernel.ConvolutionKernel`: weights of shape
  `(out_channels, in_channels, k, k)` and one bias for each output channel.
  Both are drawn from a normal distribution with mean 0 and standard deviation
  0.1. You can pass a `numpy.random.Generator` as `rng` to get reproducible
  values.
- `bloodcnn.convolution.ConvolutionLayer`: a convolution with stride and zero
  padding, followed by an activation. `output_size(height, width)` gives the
  spatial size of the result. `kernel_info()` returns a one-line description.
  `forward` raises `ValueError` when the kernel does not fit the input.
- `bloodcnn.pooling.PoolingLayer`: max, min or average pooling, chosen with
  `PoolingType`. Average pooling divides by the full window area.
  `forward` raises `ValueError` when the window does not fit the input.
- `bloodcnn.image.Image`: a channels × height × width float32 array with an
  integer label. `Image.blank` creates an all-zero image. `shape` gives the
  image's `(channels, height, width)`.
- `bloodcnn.loader.BloodMNISTLoader`: reads images from CSV files.
  - `load_from_csv(filename)` returns the number of images loaded so far.
  - `class_counts()` gives the number of images in each of the eight classes.
  - `dataset_info()` returns a text summary.

  Open failures and malformed rows raise `DatasetError`.

## CSV format

The file begins with a header line. After that, each row holds a label from
0 to 7, followed by 2352 normalised pixel values. The pixel values are given
channel by channel, then row by row. The loader skips blank rows.

## What this package does not do

The package is a library only and has no command-line program. To load a
dataset file, build a network and print statistics of its output, you write
that script yourself with the classes above. The package also has no
training, back-propagation or saving of weights.