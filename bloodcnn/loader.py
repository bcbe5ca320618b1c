"""Loading Blood-MNIST images from CSV files."""

from __future__ import annotations

import csv
import logging
import os

import numpy as np

from bloodcnn.image import Image

logger = logging.getLogger(__name__)

CHANNELS = 3
HEIGHT = 28
WIDTH = 28
PIXELS = CHANNELS * HEIGHT * WIDTH

CLASS_NAMES = (
    "Basophil",
    "Eosinophil",
    "Erythroblast",
    "Immature granulocytes",
    "Lymphocyte",
    "Monocyte",
    "Neutrophil",
    "Platelet",
)


class DatasetError(Exception):
    """Raised when a dataset file cannot be read or is malformed."""


class BloodMNISTLoader:
    """Collects 3x28x28 labelled images read from CSV files."""

    def __init__(self) -> None:
        self.images: list[Image] = []

    def load_from_csv(self, filename: str | os.PathLike) -> int:
        """Read images from a CSV file and return how many images are now loaded.

        The first line is a header. Each following line holds a label and then
        the normalised pixel values, channel by channel and row by row.
        """
        try:
            handle = open(filename, newline="", encoding="utf-8")
        except OSError as exc:
            raise DatasetError(f"cannot open file {filename}: {exc}") from exc

        loaded: list[Image] = []
        with handle:
            reader = csv.reader(handle)
            next(reader, None)
            for line_number, row in enumerate(reader, start=2):
                if not row:
                    continue
                loaded.append(self._parse_row(row, line_number))

        self.images.extend(loaded)
        logger.info("Loaded %d Blood-MNIST images", len(self.images))
        return len(self.images)

    @staticmethod
    def _parse_row(row: list[str], line_number: int) -> Image:
        if len(row) < 1 + PIXELS:
            raise DatasetError(f"missing pixels on line {line_number}")
        try:
            label = int(row[0].strip())
            pixels = [float(value) for value in row[1 : 1 + PIXELS]]
        except ValueError as exc:
            raise DatasetError(f"invalid value on line {line_number}: {exc}") from exc
        data = np.array(pixels, dtype=np.float32).reshape(CHANNELS, HEIGHT, WIDTH)
        return Image(data, label)

    def class_counts(self) -> list[int]:
        """Number of images per class; labels outside the known classes are ignored."""
        counts = [0] * len(CLASS_NAMES)
        for image in self.images:
            if 0 <= image.label < len(CLASS_NAMES):
                counts[image.label] += 1
        return counts

    def dataset_info(self) -> str:
        """Multi-line summary of the loaded images, or an empty string if none are loaded."""
        if not self.images:
            return ""
        channels, height, width = self.images[0].shape
        lines = [
            "=== Blood-MNIST dataset information ===",
            f"Total images: {len(self.images)}",
            f"Dimensions: {channels}x{height}x{width}",
            "Class distribution:",
        ]
        lines.extend(
            f"  Class {index} ({name}): {count}"
            for index, (name, count) in enumerate(zip(CLASS_NAMES, self.class_counts()))
        )
        return "\n".join(lines)