# mnistknn

A small k-nearest-neighbour classifier with no dependencies. It works on the
MNIST handwritten-digit data set and on simple delimited CSV data.

## What it does

- Reads MNIST image and label files in the IDX format
  (`train-images.idx3-ubyte`, `train-labels.idx1-ubyte`). It can also read a
  CSV file where each line holds numeric features followed by a class name.
- Min–max normalises every image feature to the range 0–1.
- Shuffles the data. It then takes the first 10 % as a training set, the next
  7.5 % as a test set and the next 0.5 % as a validation set.
- Classifies with k-NN using Euclidean or Manhattan distance. The label that
  occurs most often among the neighbours wins, and a tie goes to the smallest
  label.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
mnistknn
```

The command loads the image and label files and splits the data. It then
tries every k from 1 to `--max-k` on the validation set and keeps the k with
the highest accuracy. While it runs it prints the running validation accuracy
and, for each k, the validation accuracy. At the end it prints the test
accuracy for the best k. The command exits with status 1 if a file cannot be
opened or is cut short.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--images PATH` | `../data/train-images.idx3-ubyte` | IDX image file |
| `--labels PATH` | `../data/train-labels.idx1-ubyte` | IDX label file |
| `--max-k N` | `3` | largest k to try |
| `--metric {euclidean,manhattan}` | `euclidean` | distance metric |
| `--seed N` | none | seed for the shuffle, for repeatable splits |

## Library use

```python
import random

from mnistknn.data_handler import DataHandler
from mnistknn.knn import KNN, Metric

handler = DataHandler()
handler.read_input_data("data/train-images.idx3-ubyte")
handler.read_label_data("data/train-labels.idx1-ubyte")
handler.split_data(random.Random(0))
handler.count_classes()

classifier = KNN(3, Metric.EUCLIDEAN)
classifier.training_data = handler.training_data
classifier.test_data = handler.test_data
classifier.validation_data = handler.validation_data

print(classifier.validate_performance())
print(classifier.test_performance())
```

### Modules

- `mnistknn.data`: `Data`, a dataclass for one sample. It holds
  `feature_vector`, `normalized_feature_vector`, `label`, `enumerated_label`,
  a one-hot `class_vector` (built by `set_class_vector`) and `distance`.
  `format_vector` and `format_normalized_vector` return the vectors as text.
  `print_vector` and `print_normalized_vector` write that text to standard
  output.
- `mnistknn.common`: `CommonData`, which holds the `training_data`,
  `test_data` and `validation_data` lists.
- `mnistknn.data_handler`: `DataHandler`, with these methods:
  - `read_input_data` reads an IDX image file and normalises it.
  - `read_label_data` reads an IDX label file.
  - `read_csv(path, delimiter)` reads a CSV file. Its features are stored as
    given, without normalisation, and class names are numbered in the order
    they first appear.
  - `normalize` rescales the features.
  - `split_data(rng=None)` splits the data. It adds to the existing sets.
  - `count_classes` numbers the distinct labels.
  - `print` prints the training set.

  The same module has `DataFileError`, which is raised when a file cannot be
  opened, is cut short or holds no data. It also has `parse_be_uint32`, which
  decodes the big-endian 32-bit header fields that IDX files use.
- `mnistknn.knn`: `Metric` (`EUCLIDEAN`, `MANHATTAN`) and `KNN`, a
  `CommonData` subclass. `KNN` has these methods:
  - `find_k_nearest`
  - `find_most_frequent_class`
  - `calculate_distance`
  - `validate_performance`
  - `test_performance`

  Both performance methods return accuracy as a percentage. The module also
  has `main`, which the `mnistknn` command runs.

## Limitations

- The command line reads only IDX files. CSV data can be used only from
  Python.
- A trained classifier is not saved. Each run rebuilds the split and scans
  the whole training set for every query.
- There are no plots or confusion matrices. Only accuracy percentages are
  reported.

## Running the tests

```
pytest
```