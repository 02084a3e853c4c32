"""Shared data holder for classifiers."""

from __future__ import annotations

from dataclasses import dataclass, field

from mnistknn.data import Data


@dataclass
class CommonData:
    """Training, test and validation sets used by a classifier."""

    training_data: list[Data] = field(default_factory=list)
    test_data: list[Data] = field(default_factory=list)
    validation_data: list[Data] = field(default_factory=list)