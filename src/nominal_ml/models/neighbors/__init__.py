"""Neighbors models package."""

from .knn import Neighbor, NeighborList, NeighborStore, hamming_distance, kNNClassifier

__all__ = [
    "Neighbor",
    "NeighborList",
    "NeighborStore",
    "hamming_distance",
    "kNNClassifier",
]
