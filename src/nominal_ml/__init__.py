"""
nominal_ml.

Decision tree (ID3), k-nearest-neighbor and naive Bayes classifiers for data
whose attributes, the class included, are all nominal.
"""

from . import exceptions, utils, data, configs, models
from .data import NominalAttribute, NominalDataset, Row
from .models import (
    ID3Classifier,
    NaiveBayesClassifier,
    NominalEstimator,
    create_model,
    kNNClassifier,
)

__all__ = [
    "configs",
    "data",
    "exceptions",
    "models",
    "utils",
    "ID3Classifier",
    "NaiveBayesClassifier",
    "NominalEstimator",
    "NominalAttribute",
    "NominalDataset",
    "Row",
    "create_model",
    "kNNClassifier",
]
