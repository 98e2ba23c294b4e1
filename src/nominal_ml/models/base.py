"""
Base class for classifiers over nominal attributes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar, runtime_checkable

import numpy as np

from ..data.dataset import DatasetProtocol, RowProtocol, validate_dataset
from ..exceptions import NotFittedError

logger = logging.getLogger(__name__)

__all__ = ["TrainedModel", "NominalClassifier"]


@runtime_checkable
class TrainedModel(Protocol):
    """Immutable result of training, queried for class distributions."""

    num_classes: int

    def distribution(self, row: RowProtocol) -> np.ndarray:
        """Class probability distribution for a row."""
        ...


M = TypeVar("M", bound=TrainedModel)


class NominalClassifier(ABC, Generic[M]):
    """
    Abstract base class for classifiers over nominal attributes.

    `train` builds an immutable model value, keeps it as `self.model` and returns
    it. Retraining replaces the value rather than mutating it, so a model handed
    out earlier stays valid. Concurrent `predict` calls on a trained classifier are
    safe; `train` must not overlap with anything else on the same instance.
    """

    def __init__(self) -> None:
        self.model: M | None = None

    @property
    def is_fitted(self) -> bool:
        return self.model is not None

    def train(self, dataset: DatasetProtocol) -> M:
        """
        Train on a dataset.

        Args:
            dataset: Labeled rows over nominal attributes.

        Returns:
            The trained model value.

        Raises:
            DataError: If the dataset is malformed.
        """
        validate_dataset(dataset)
        if dataset.num_instances == 0:
            logger.warning(
                f"{type(self).__name__} trained on an empty dataset; "
                "predictions will be uniform."
            )
        logger.debug(
            f"Training {type(self).__name__} on {dataset.num_instances} instances, "
            f"{dataset.num_attributes} attributes, {dataset.num_classes} classes"
        )
        self.model = self._build(dataset)
        return self.model

    @abstractmethod
    def _build(self, dataset: DatasetProtocol) -> M:
        """Build the model value from a validated dataset."""
        pass

    def _require_model(self) -> M:
        if self.model is None:
            raise NotFittedError(f"{type(self).__name__} not trained, call `train` first.")
        return self.model

    def predict(self, row: RowProtocol) -> np.ndarray:
        """Return the class probability distribution for a row."""
        return self._require_model().distribution(row)

    def predict_class(self, row: RowProtocol) -> int:
        """Return the most probable class index (first maximum wins)."""
        return int(np.argmax(self.predict(row)))

    def predict_dataset(self, dataset: DatasetProtocol) -> np.ndarray:
        """Return an (instances, classes) matrix of distributions."""
        model = self._require_model()
        if dataset.num_instances == 0:
            return np.empty((0, model.num_classes))
        return np.vstack([model.distribution(dataset.row(i)) for i in range(dataset.num_instances)])
