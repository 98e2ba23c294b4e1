from __future__ import annotations

from nominal_ml.models.base import NominalClassifier, TrainedModel
from nominal_ml.models.registry import MODEL_REGISTRY, get_model, list_models, register_model
from nominal_ml.models.naive_bayes import CountTable, NaiveBayesClassifier
from nominal_ml.models.neighbors import Neighbor, NeighborList, NeighborStore, hamming_distance, kNNClassifier
from nominal_ml.models.trees import DecisionTree, ID3Classifier, Internal, Leaf, TreeNode
from nominal_ml.models.factory import MODEL_NAMES, create_model
from nominal_ml.models.estimator import NominalEstimator

__all__ = [
    "NominalClassifier",
    "TrainedModel",
    "MODEL_REGISTRY",
    "get_model",
    "list_models",
    "register_model",
    "CountTable",
    "NaiveBayesClassifier",
    "Neighbor",
    "NeighborList",
    "NeighborStore",
    "hamming_distance",
    "kNNClassifier",
    "DecisionTree",
    "ID3Classifier",
    "Internal",
    "Leaf",
    "TreeNode",
    "MODEL_NAMES",
    "create_model",
    "NominalEstimator",
]
