"""A single labelled sample with raw and normalised features."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass
class Data:
    """One sample: raw features, normalised features, label and one-hot class vector."""

    feature_vector: list[int] = field(default_factory=list)
    normalized_feature_vector: list[float] = field(default_factory=list)
    class_vector: list[int] = field(default_factory=list)
    label: int = 0
    enumerated_label: int = 0
    distance: float = 0.0

    def set_class_vector(self, class_counts: int) -> None:
        """Build a one-hot vector of length ``class_counts`` marking the label."""
        self.class_vector = [1 if i == self.label else 0 for i in range(class_counts)]

    def format_vector(self) -> str:
        """Return the raw feature vector as ``[ a b c ]``."""
        return "[ " + "".join(f"{value} " for value in self.feature_vector) + "]"

    def format_normalized_vector(self) -> str:
        """Return the normalised feature vector with two decimals per value."""
        return "[ " + "".join(f"{value:.2f} " for value in self.normalized_feature_vector) + "]"

    def print_vector(self) -> str:
        """Write the raw feature vector to standard output and return the line written."""
        line = self.format_vector() + "\n"
        sys.stdout.write(line)
        return line

    def print_normalized_vector(self) -> str:
        """Write the normalised feature vector to standard output and return the line written."""
        line = self.format_normalized_vector() + "\n"
        sys.stdout.write(line)
        return line