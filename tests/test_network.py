import numpy as np
import pytest

from bloodcnn.activation import ActivationType
from bloodcnn.network import ConvolutionalNeuralNetwork
from bloodcnn.pooling import PoolingType


def _network(seed=7):
    net = ConvolutionalNeuralNetwork(rng=np.random.default_rng(seed))
    net.add_convolution_layer(3, 4, 3, ActivationType.RELU)
    net.add_pooling_layer(2, PoolingType.MAX)
    return net


def _input(seed=1, shape=(3, 8, 8)):
    return np.random.default_rng(seed).random(shape, dtype=np.float32)


def test_forward_shape_with_pooling():
    out = _network().forward(_input())
    assert out.shape == (4, 3, 3)


def test_relu_output_is_non_negative():
    out = _network().forward(_input())
    assert out.dtype == np.float32
    assert (out >= 0).all()


def test_same_seed_gives_same_output():
    data = _input()
    first = _network(seed=3).forward(data)
    second = _network(seed=3).forward(data)
    np.testing.assert_array_equal(first, second)


def test_pooling_skipped_when_missing():
    net = ConvolutionalNeuralNetwork(rng=np.random.default_rng(0))
    net.add_convolution_layer(3, 4, 3)
    net.add_pooling_layer(2)
    net.add_convolution_layer(4, 5, 1)
    out = net.forward(_input())
    conv_only = net.conv_layers[1].output_size(3, 3)
    assert out.shape == (5, *conv_only)


def test_pooling_layer_uses_window_as_stride():
    net = ConvolutionalNeuralNetwork()
    layer = net.add_pooling_layer(3, PoolingType.AVERAGE)
    assert layer.stride == layer.pool_size == 3
    assert layer.pooling_type is PoolingType.AVERAGE
    assert net.pool_layers == [layer]


def test_default_activation_and_pooling_type():
    net = ConvolutionalNeuralNetwork()
    conv = net.add_convolution_layer(3, 2, 3)
    pool = net.add_pooling_layer(2)
    assert conv.activation is ActivationType.RELU
    assert pool.pooling_type is PoolingType.MAX


def test_no_layers_returns_input():
    data = _input()
    out = ConvolutionalNeuralNetwork().forward(data)
    np.testing.assert_array_equal(out, data)


def test_kernel_larger_than_input_raises():
    net = ConvolutionalNeuralNetwork()
    net.add_convolution_layer(3, 2, 5)
    with pytest.raises(ValueError):
        net.forward(_input(shape=(3, 3, 3)))


def test_architecture_lists_layers():
    net = _network()
    net.add_convolution_layer(4, 8, 3)
    text = net.architecture()
    lines = text.splitlines()
    assert "Convolution layers: 2" in lines
    assert "Pooling layers: 1" in lines
    assert lines[-2] == "Conv1: " + net.conv_layers[0].kernel_info()
    assert lines[-1] == "Conv2: " + net.conv_layers[1].kernel_info()