"""Loading, normalising and splitting of labelled datasets."""

from __future__ import annotations

import random
from pathlib import Path

from mnistknn.data import Data


class DataFileError(ValueError):
    """Raised when a data or label file cannot be read or is malformed."""


def parse_be_uint32(raw: bytes) -> int:
    """Decode four big-endian bytes into an unsigned integer."""
    if len(raw) != 4:
        raise ValueError(f"expected 4 bytes, got {len(raw)}")
    return int.from_bytes(raw, "big")


def _read_file(path: str | Path, kind: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise DataFileError(f"Invalid {kind} File Path: {path}") from exc


def _read_header(content: bytes, fields: int, kind: str) -> list[int]:
    size = 4 * fields
    if len(content) < size:
        raise DataFileError(f"truncated {kind} header")
    return [parse_be_uint32(content[offset:offset + 4]) for offset in range(0, size, 4)]


class DataHandler:
    """Reads IDX or CSV data, normalises features and splits into sets."""

    TRAIN_SET_PERCENT = 0.1
    TEST_SET_PERCENT = 0.075
    VALID_SET_PERCENT = 0.005

    def __init__(self) -> None:
        self.data_array: list[Data] = []
        self.training_data: list[Data] = []
        self.test_data: list[Data] = []
        self.validation_data: list[Data] = []
        self.class_counts = 0
        self.feature_vector_size = 0
        self.class_from_int: dict[int, int] = {}
        self.class_from_string: dict[str, int] = {}

    def read_csv(self, path: str | Path, delimiter: str) -> None:
        """Read delimited rows whose last field is the class name."""
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self.class_counts = 0
        try:
            text = Path(path).read_text()
        except OSError as exc:
            raise DataFileError(f"Invalid CSV File Path: {path}") from exc

        for line in text.splitlines():
            if not line:
                continue
            *features, class_name = line.split(delimiter)
            try:
                values = [float(token) for token in features]
            except ValueError as exc:
                raise DataFileError(f"bad feature value in line {line!r}") from exc
            d = Data(normalized_feature_vector=values)
            if class_name not in self.class_from_string:
                self.class_from_string[class_name] = self.class_counts
                self.class_counts += 1
            d.label = self.class_from_string[class_name]
            self.data_array.append(d)

        if not self.data_array:
            raise DataFileError(f"no data rows in {path}")
        for d in self.data_array:
            d.set_class_vector(self.class_counts)
        self.feature_vector_size = len(self.data_array[0].normalized_feature_vector)

    def read_input_data(self, path: str | Path) -> None:
        """Read an IDX image file and normalise its features."""
        content = _read_file(path, "Input")
        _magic, num_images, num_rows, num_cols = _read_header(content, 4, "image")
        print("Done getting file header.")
        image_size = num_rows * num_cols
        body = content[16:]
        for i in range(num_images):
            pixels = body[i * image_size:(i + 1) * image_size]
            d = Data(feature_vector=list(pixels))
            d.set_class_vector(self.class_counts)
            self.data_array.append(d)
        if not self.data_array:
            raise DataFileError(f"no images in {path}")
        self.normalize()
        self.feature_vector_size = len(self.data_array[0].feature_vector)
        print(f"Successfully read {len(self.data_array)} data entries.")
        print(f"The Feature Vector Size is: {self.feature_vector_size}")

    def read_label_data(self, path: str | Path) -> None:
        """Read an IDX label file and assign labels to the loaded data."""
        content = _read_file(path, "Label")
        _magic, num_labels = _read_header(content, 2, "label")
        labels = content[8:8 + num_labels]
        if len(labels) > len(self.data_array):
            raise DataFileError(
                f"{len(labels)} labels for {len(self.data_array)} data entries"
            )
        for d, label in zip(self.data_array, labels):
            d.label = label
        print("Done getting Label header.")

    def split_data(self, rng: random.Random | None = None) -> None:
        """Shuffle the data and append slices to the training, test and validation sets."""
        total = len(self.data_array)
        train_size = int(total * self.TRAIN_SET_PERCENT)
        test_size = int(total * self.TEST_SET_PERCENT)
        valid_size = int(total * self.VALID_SET_PERCENT)

        (rng or random.Random()).shuffle(self.data_array)

        test_end = train_size + test_size
        self.training_data.extend(self.data_array[:train_size])
        self.test_data.extend(self.data_array[train_size:test_end])
        self.validation_data.extend(self.data_array[test_end:test_end + valid_size])

        print(f"Training Data Size: {len(self.training_data)}.")
        print(f"Test Data Size: {len(self.test_data)}.")
        print(f"Validation Data Size: {len(self.validation_data)}.")

    def count_classes(self) -> None:
        """Enumerate distinct labels in order of first appearance."""
        self.class_from_int = {}
        for d in self.data_array:
            d.enumerated_label = self.class_from_int.setdefault(
                d.label, len(self.class_from_int)
            )
        self.class_counts = len(self.class_from_int)
        for d in self.data_array:
            d.set_class_vector(self.class_counts)
        print(f"Successfully Extracted {self.class_counts} Unique Classes.")

    def normalize(self) -> None:
        """Min-max scale each feature across the data set into [0, 1]."""
        if not self.data_array:
            raise ValueError("no data to normalize")
        first, *rest = self.data_array
        mins = [float(v) for v in first.feature_vector]
        maxs = list(mins)
        for d in rest:
            if len(d.feature_vector) > len(mins):
                raise ValueError("feature vector longer than the first one")
            for j, value in enumerate(d.feature_vector):
                mins[j] = min(mins[j], value)
                maxs[j] = max(maxs[j], value)

        for d in self.data_array:
            d.set_class_vector(self.class_counts)
            d.normalized_feature_vector = [
                0.0 if hi == lo else (value - lo) / (hi - lo)
                for value, lo, hi in zip(d.feature_vector, mins, maxs)
            ]

    def print(self) -> None:
        """Print the normalised training data with its labels."""
        print("Training Data:")
        for d in self.training_data:
            values = "".join(f"{value:.3f}," for value in d.normalized_feature_vector)
            print(f"{values} ->   {d.label}")