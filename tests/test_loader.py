import numpy as np
import pytest

from bloodcnn.loader import CLASS_NAMES, PIXELS, BloodMNISTLoader, DatasetError


def _write_csv(path, rows):
    header = ",".join(["label"] + [f"p{i}" for i in range(PIXELS)])
    lines = [header]
    for label, pixels in rows:
        lines.append(",".join([str(label)] + [repr(float(p)) for p in pixels]))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _pixels(seed):
    return np.random.default_rng(seed).random(PIXELS).astype(np.float32)


def test_round_trip_pixels_and_label(tmp_path):
    pixels = _pixels(0)
    path = _write_csv(tmp_path / "data.csv", [(5, pixels)])
    loader = BloodMNISTLoader()
    assert loader.load_from_csv(path) == 1
    image = loader.images[0]
    assert image.label == 5
    assert image.shape == (3, 28, 28)
    np.testing.assert_array_equal(image.data.reshape(-1), pixels)


def test_channel_major_order(tmp_path):
    pixels = np.arange(PIXELS, dtype=np.float32)
    path = _write_csv(tmp_path / "data.csv", [(0, pixels)])
    loader = BloodMNISTLoader()
    loader.load_from_csv(path)
    data = loader.images[0].data
    assert data[1, 0, 0] == pixels[28 * 28]
    assert data[0, 1, 0] == pixels[28]


def test_loads_accumulate(tmp_path):
    path = _write_csv(tmp_path / "data.csv", [(1, _pixels(1)), (2, _pixels(2))])
    loader = BloodMNISTLoader()
    assert loader.load_from_csv(path) == 2
    assert loader.load_from_csv(path) == 4
    assert [img.label for img in loader.images] == [1, 2, 1, 2]


def test_header_only_file_loads_nothing(tmp_path):
    path = _write_csv(tmp_path / "data.csv", [])
    loader = BloodMNISTLoader()
    assert loader.load_from_csv(path) == 0
    assert loader.images == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(DatasetError):
        BloodMNISTLoader().load_from_csv(tmp_path / "absent.csv")


def test_missing_pixels_raises(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("label,p0\n3,0.5,0.25\n", encoding="utf-8")
    loader = BloodMNISTLoader()
    with pytest.raises(DatasetError):
        loader.load_from_csv(path)
    assert loader.images == []


def test_invalid_label_raises(tmp_path):
    path = _write_csv(tmp_path / "data.csv", [("x", _pixels(3))])
    with pytest.raises(DatasetError):
        BloodMNISTLoader().load_from_csv(path)


def test_class_counts_ignore_unknown_labels(tmp_path):
    rows = [(0, _pixels(0)), (2, _pixels(1)), (2, _pixels(2)), (9, _pixels(3))]
    loader = BloodMNISTLoader()
    loader.load_from_csv(_write_csv(tmp_path / "data.csv", rows))
    counts = loader.class_counts()
    assert len(counts) == len(CLASS_NAMES)
    assert counts[0] == 1
    assert counts[2] == 2
    assert sum(counts) == 3


def test_dataset_info(tmp_path):
    rows = [(7, _pixels(0)), (7, _pixels(1))]
    loader = BloodMNISTLoader()
    loader.load_from_csv(_write_csv(tmp_path / "data.csv", rows))
    lines = loader.dataset_info().splitlines()
    assert "Total images: 2" in lines
    assert "Dimensions: 3x28x28" in lines
    assert "  Class 7 (Platelet): 2" in lines
    assert "  Class 0 (Basophil): 0" in lines


def test_dataset_info_empty():
    assert BloodMNISTLoader().dataset_info() == ""