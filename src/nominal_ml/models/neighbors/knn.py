"""k-Nearest Neighbors over nominal attributes."""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from ...data.dataset import DatasetProtocol, RowProtocol, as_matrix, check_row_length
from ...exceptions import ConfigurationError
from ...utils.functions.probability import laplace_distribution
from ..base import NominalClassifier
from ..registry import register_model

logger = logging.getLogger(__name__)

__all__ = ["Neighbor", "NeighborList", "NeighborStore", "kNNClassifier", "hamming_distance"]


def hamming_distance(first: RowProtocol, second: RowProtocol, attribute_indices: Sequence[int]) -> int:
    """Number of the given attribute slots at which two rows differ."""
    return sum(1 for i in attribute_indices if first.value(i) != second.value(i))


@dataclass(frozen=True)
class Neighbor:
    """A training row index and its distance to the query."""

    distance: int
    index: int


class NeighborList:
    """
    Ascending list of the nearest neighbors seen so far.

    Holds at least `k` entries once `k` have been offered. Entries tied with the
    k-th smallest distance are all kept, so the list may grow past `k`.
    """

    def __init__(self, k: int) -> None:
        self.k = k
        self._entries: list[Neighbor] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Neighbor]:
        return iter(self._entries)

    @property
    def worst_distance(self) -> int | None:
        return self._entries[-1].distance if self._entries else None

    def offer(self, distance: int, index: int) -> bool:
        """
        Insert a candidate at its sorted position if it can still be kept.

        Returns:
            bool: Whether the candidate was inserted.
        """
        if len(self._entries) >= self.k and distance > self._entries[-1].distance:
            return False
        bisect.insort_right(self._entries, Neighbor(distance, index), key=lambda n: n.distance)
        self._prune()
        return True

    def _prune(self) -> None:
        # Cut after the first entry at or past position k whose successor is farther.
        entries = self._entries
        for count in range(self.k, len(entries)):
            if entries[count - 1].distance != entries[count].distance:
                del entries[count:]
                break


@dataclass(frozen=True, eq=False)
class NeighborStore:
    """
    Trained kNN state: the training rows and the neighbor count.

    `features` holds the non-class attribute values of every training row, in
    training order.
    """

    features: np.ndarray
    class_values: np.ndarray
    attribute_indices: tuple[int, ...]
    num_attributes: int
    num_classes: int
    k: int

    def find_neighbors(self, row: RowProtocol) -> list[Neighbor]:
        """Scan the training rows in order and return the tie-inclusive k nearest."""
        check_row_length(row, self.num_attributes)
        query = np.array([row.value(i) for i in self.attribute_indices], dtype=np.int64)
        distances = np.count_nonzero(self.features != query, axis=1)
        neighbors = NeighborList(self.k)
        for index, distance in enumerate(distances.tolist()):
            neighbors.offer(distance, index)
        return list(neighbors)

    def distribution(self, row: RowProtocol) -> np.ndarray:
        """Add-one smoothed class distribution of the nearest neighbors."""
        neighbors = self.find_neighbors(row)
        indices = np.fromiter((n.index for n in neighbors), dtype=np.intp, count=len(neighbors))
        return laplace_distribution(self.class_values[indices], self.num_classes)


@register_model("KNN")
class kNNClassifier(NominalClassifier[NeighborStore]):  # noqa: N801
    """
    k-Nearest Neighbors with Hamming distance.

    Training only retains the rows; prediction votes over the k nearest rows plus
    any rows tied with the k-th distance.
    """

    def __init__(self, k: int = 3) -> None:
        """
        Initialize the k-NN classifier.

        Args:
            k (int, optional): Number of neighbors. Defaults to 3.
        """
        super().__init__()
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
            raise ConfigurationError(f"k must be a positive integer, got {k!r}.")
        self.k = int(k)

    def find_neighbors(self, row: RowProtocol) -> list[Neighbor]:
        """Return the neighbors `predict` would vote over."""
        return self._require_model().find_neighbors(row)

    def _build(self, dataset: DatasetProtocol) -> NeighborStore:
        matrix = as_matrix(dataset)
        attribute_indices = tuple(i for i in range(dataset.num_attributes) if i != dataset.class_index)
        features = matrix[:, list(attribute_indices)]
        class_values = matrix[:, dataset.class_index]
        features.setflags(write=False)
        class_values.setflags(write=False)
        logger.debug(f"Stored {len(features)} training rows for kNN (k={self.k})")
        return NeighborStore(
            features,
            class_values,
            attribute_indices,
            dataset.num_attributes,
            dataset.num_classes,
            self.k,
        )
