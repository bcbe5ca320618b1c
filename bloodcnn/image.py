"""Labelled multi-channel image."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class Image:
    """An image stored as a channels x height x width float32 array with a class label."""

    data: np.ndarray
    label: int = 0

    def __post_init__(self) -> None:
        self.data = np.asarray(self.data, dtype=np.float32)
        if self.data.ndim != 3:
            raise ValueError(
                f"image data must have 3 dimensions (channels, height, width), got {self.data.ndim}"
            )

    @classmethod
    def blank(cls, channels: int, height: int, width: int) -> "Image":
        """Create an all-zero image with label 0."""
        return cls(np.zeros((channels, height, width), dtype=np.float32), 0)

    @property
    def shape(self) -> tuple[int, int, int]:
        """The (channels, height, width) of the image."""
        channels, height, width = self.data.shape
        return channels, height, width