[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bloodcnn"
version = "0.1.0"
description = "Forward pass of a small convolutional neural network for Blood-MNIST style images"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["cnn", "convolution", "pooling", "neural-network", "bloodmnist", "forward-pass"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bloodcnn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
