import random
import struct

import pytest

from mnistknn.data import Data
from mnistknn.data_handler import DataFileError, DataHandler, parse_be_uint32

IMAGES = [
    [0, 10, 5, 255],
    [100, 10, 5, 0],
    [50, 10, 200, 128],
]


def _write_images(path, images, rows=2, cols=2):
    header = struct.pack(">IIII", 2051, len(images), rows, cols)
    path.write_bytes(header + b"".join(bytes(img) for img in images))
    return path


def _write_labels(path, labels):
    path.write_bytes(struct.pack(">II", 2049, len(labels)) + bytes(labels))
    return path


@pytest.fixture
def loaded(tmp_path):
    handler = DataHandler()
    handler.read_input_data(_write_images(tmp_path / "img", IMAGES))
    return handler


@pytest.mark.parametrize("value", [0, 1, 2051, 60000, 2**32 - 1])
def test_parse_be_uint32_round_trip(value):
    assert parse_be_uint32(struct.pack(">I", value)) == value


def test_parse_be_uint32_is_big_endian():
    assert parse_be_uint32(b"\x00\x00\x08\x03") == 2051


@pytest.mark.parametrize("raw", [b"", b"\x01\x02\x03", b"\x01\x02\x03\x04\x05"])
def test_parse_be_uint32_wrong_length(raw):
    with pytest.raises(ValueError):
        parse_be_uint32(raw)


def test_read_input_data_features(loaded, capsys):
    assert [d.feature_vector for d in loaded.data_array] == IMAGES
    assert loaded.feature_vector_size == len(IMAGES[0])


def test_read_input_data_reports(tmp_path, capsys):
    handler = DataHandler()
    handler.read_input_data(_write_images(tmp_path / "img", IMAGES))
    out = capsys.readouterr().out
    assert "Done getting file header." in out
    assert f"Successfully read {len(IMAGES)} data entries." in out


def test_read_input_data_normalizes(loaded):
    normalized = [d.normalized_feature_vector for d in loaded.data_array]
    assert all(0.0 <= v <= 1.0 for row in normalized for v in row)
    assert normalized[0][0] == 0.0
    assert normalized[1][0] == 1.0
    assert [row[1] for row in normalized] == [0.0, 0.0, 0.0]
    assert normalized[0][3] == 1.0
    assert normalized[1][3] == 0.0


def test_read_input_data_missing_file(tmp_path):
    with pytest.raises(DataFileError):
        DataHandler().read_input_data(tmp_path / "absent")


def test_read_input_data_truncated_header(tmp_path):
    path = tmp_path / "img"
    path.write_bytes(b"\x00\x00\x08\x03\x00")
    with pytest.raises(DataFileError):
        DataHandler().read_input_data(path)


def test_read_input_data_no_images(tmp_path):
    with pytest.raises(DataFileError):
        DataHandler().read_input_data(_write_images(tmp_path / "img", []))


def test_read_label_data(loaded, tmp_path):
    labels = [7, 3, 7]
    loaded.read_label_data(_write_labels(tmp_path / "lbl", labels))
    assert [d.label for d in loaded.data_array] == labels


def test_read_label_data_too_many_labels(loaded, tmp_path):
    with pytest.raises(DataFileError):
        loaded.read_label_data(_write_labels(tmp_path / "lbl", [1, 2, 3, 4]))


def test_read_label_data_missing_file(loaded, tmp_path):
    with pytest.raises(DataFileError):
        loaded.read_label_data(tmp_path / "absent")


def test_count_classes(loaded, tmp_path):
    labels = [7, 3, 7]
    loaded.read_label_data(_write_labels(tmp_path / "lbl", labels))
    loaded.count_classes()
    assert loaded.class_counts == len(set(labels))
    assert set(loaded.class_from_int) == set(labels)
    assert sorted(loaded.class_from_int.values()) == list(range(loaded.class_counts))
    for d in loaded.data_array:
        assert d.enumerated_label == loaded.class_from_int[d.label]
        assert len(d.class_vector) == loaded.class_counts


def _handler_with(n):
    handler = DataHandler()
    handler.data_array = [Data(label=i % 10, feature_vector=[i]) for i in range(n)]
    return handler


def test_split_data_sizes():
    handler = _handler_with(1000)
    handler.split_data(random.Random(1))
    assert len(handler.training_data) == 100
    assert len(handler.test_data) == 75
    assert len(handler.validation_data) == 5


def test_split_data_sets_are_disjoint():
    handler = _handler_with(1000)
    handler.split_data(random.Random(2))
    ids = [
        d.feature_vector[0]
        for d in handler.training_data + handler.test_data + handler.validation_data
    ]
    assert len(ids) == len(set(ids))
    assert sorted(d.feature_vector[0] for d in handler.data_array) == list(range(1000))


def test_split_data_is_reproducible_with_seed():
    a = _handler_with(400)
    b = _handler_with(400)
    a.split_data(random.Random(42))
    b.split_data(random.Random(42))
    assert [d.feature_vector for d in a.training_data] == [
        d.feature_vector for d in b.training_data
    ]


def test_read_csv(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("1.0,2.0,a\n3.0,4.0,b\n\n5,6,a\n")
    handler = DataHandler()
    handler.read_csv(path, ",")
    rows = handler.data_array
    assert [d.normalized_feature_vector for d in rows] == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    assert handler.class_counts == 2
    assert handler.feature_vector_size == 2
    assert rows[0].label == rows[2].label
    assert rows[0].label != rows[1].label
    assert all(d.class_vector[d.label] == 1 for d in rows)


def test_read_csv_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("\n\n")
    with pytest.raises(DataFileError):
        DataHandler().read_csv(path, ",")


def test_read_csv_bad_value(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("x,2.0,a\n")
    with pytest.raises(DataFileError):
        DataHandler().read_csv(path, ",")


def test_normalize_empty_raises():
    with pytest.raises(ValueError):
        DataHandler().normalize()


def test_print_training_data(capsys):
    handler = DataHandler()
    handler.training_data = [Data(normalized_feature_vector=[0.5, 1.0], label=4)]
    handler.print()
    out = capsys.readouterr().out
    assert out.startswith("Training Data:\n")
    assert "0.500,1.000, ->   4" in out