[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mnistknn"
version = "0.1.0"
description = "k-nearest-neighbour classification of MNIST IDX and CSV data sets"
requires-python = ">=3.10"
dependencies = []
keywords = ["mnist", "knn", "k-nearest-neighbours", "machine-learning", "idx", "classification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mnistknn = "mnistknn.knn:main"

[tool.hatch.build.targets.wheel]
packages = ["mnistknn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
