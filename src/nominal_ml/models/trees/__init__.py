"""Tree-based models package."""

from .id3 import DecisionTree, ID3Classifier, Internal, Leaf, TreeNode

__all__ = [
    "DecisionTree",
    "ID3Classifier",
    "Internal",
    "Leaf",
    "TreeNode",
]
