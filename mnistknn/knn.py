"""k-nearest-neighbour classifier over normalised feature vectors."""

from __future__ import annotations

import argparse
import math
import random
from collections import Counter
from enum import Enum

from mnistknn.common import CommonData
from mnistknn.data import Data
from mnistknn.data_handler import DataFileError, DataHandler


class Metric(Enum):
    """Distance metric used to compare feature vectors."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"


class KNN(CommonData):
    """Classifies samples by majority label among their k nearest training samples."""

    def __init__(self, k: int = 1, metric: Metric = Metric.EUCLIDEAN) -> None:
        super().__init__()
        self.k = k
        self.metric = metric
        self.neighbors: list[Data] | None = None

    def find_k_nearest(self, query_point: Data) -> list[Data]:
        """Collect the k nearest training samples to ``query_point``.

        Each pass takes the closest sample whose distance is strictly greater
        than the previous pass's, so samples at equal distance count once.
        When no farther sample remains the last one is taken again.
        """
        if not self.training_data:
            raise ValueError("no training data")
        neighbors: list[Data] = []
        previous_min = -math.inf
        chosen: Data | None = None
        for step in range(self.k):
            if step == 0:
                for candidate in self.training_data:
                    candidate.distance = self.calculate_distance(query_point, candidate)
            best = math.inf
            for candidate in self.training_data:
                dist = candidate.distance
                if dist > previous_min and dist < best:
                    best = dist
                    chosen = candidate
            if chosen is None:
                raise ValueError("no finite distance to any training sample")
            neighbors.append(chosen)
            previous_min = best
        self.neighbors = neighbors
        return neighbors

    def find_most_frequent_class(self) -> int:
        """Return the most common label among the current neighbours.

        Ties go to the smallest label; no neighbours gives 0. The neighbour
        list is consumed by this call.
        """
        if self.neighbors is None:
            raise RuntimeError("find_k_nearest must be called first")
        counts = Counter(d.label for d in self.neighbors)
        self.neighbors = None
        best, highest = 0, 0
        for label in sorted(counts):
            if counts[label] > highest:
                highest = counts[label]
                best = label
        return best

    def calculate_distance(self, query_point: Data, other: Data) -> float:
        """Distance between the normalised feature vectors of two samples."""
        a = query_point.normalized_feature_vector
        b = other.normalized_feature_vector
        if len(a) != len(b):
            raise ValueError("Vector size mismatch.")
        if self.metric is Metric.MANHATTAN:
            return sum(abs(x - y) for x, y in zip(a, b))
        return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))

    def _predict(self, query_point: Data) -> int:
        self.find_k_nearest(query_point)
        return self.find_most_frequent_class()

    def validate_performance(self) -> float:
        """Percentage of validation samples classified correctly."""
        if not self.validation_data:
            raise ValueError("no validation data")
        correct = 0
        for seen, query_point in enumerate(self.validation_data, start=1):
            if self._predict(query_point) == query_point.label:
                correct += 1
            print(f"Current Performance: {correct * 100.0 / seen:.3f} %")
        performance = correct * 100.0 / len(self.validation_data)
        print(f"Validation Performance for K = {self.k}: {performance:.3f}")
        return performance

    def test_performance(self) -> float:
        """Percentage of test samples classified correctly."""
        if not self.test_data:
            raise ValueError("no test data")
        correct = sum(
            1 for query_point in self.test_data
            if self._predict(query_point) == query_point.label
        )
        performance = correct * 100.0 / len(self.test_data)
        print(f"Test Performance for K = {self.k}: {performance:.3f}")
        return performance


def main(argv: list[str] | None = None) -> int:
    """Load IDX data, pick the best k on validation data and report test accuracy."""
    parser = argparse.ArgumentParser(description="k-nearest-neighbour classifier for IDX data")
    parser.add_argument("--images", default="../data/train-images.idx3-ubyte")
    parser.add_argument("--labels", default="../data/train-labels.idx1-ubyte")
    parser.add_argument("--max-k", type=int, default=3)
    parser.add_argument(
        "--metric", choices=[m.value for m in Metric], default=Metric.EUCLIDEAN.value
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    handler = DataHandler()
    try:
        handler.read_input_data(args.images)
        handler.read_label_data(args.labels)
    except DataFileError as exc:
        print(exc)
        return 1
    handler.split_data(random.Random(args.seed))
    handler.count_classes()

    nearest = KNN(1, Metric(args.metric))
    nearest.training_data = handler.training_data
    nearest.test_data = handler.test_data
    nearest.validation_data = handler.validation_data

    best_k = 1
    best_performance = -1.0
    for k in range(1, args.max_k + 1):
        nearest.k = k
        performance = nearest.validate_performance()
        if performance > best_performance:
            best_performance = performance
            best_k = k
    nearest.k = best_k
    nearest.test_performance()
    return 0