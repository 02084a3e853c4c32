"""k-nearest-neighbour classification of MNIST IDX and CSV data sets."""

__version__ = "0.1.0"
__all__ = ["common", "data", "data_handler", "knn"]