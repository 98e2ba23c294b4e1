"""Naive Bayes over nominal attributes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ...data.dataset import DatasetProtocol, RowProtocol, as_matrix, check_row_length
from ...exceptions import UnseenValueError
from ...utils.functions.probability import normalize
from ..base import NominalClassifier
from ..registry import register_model

logger = logging.getLogger(__name__)

__all__ = ["CountTable", "NaiveBayesClassifier"]


@dataclass(frozen=True, eq=False)
class CountTable:
    """
    Trained naive Bayes counts.

    Every (attribute, value) pair of the non-class attributes owns one column of
    `class_att_counts`, at `start_index[attribute] + value`. The class slot has
    a start index of -1.
    """

    class_counts: np.ndarray
    class_att_counts: np.ndarray
    start_index: tuple[int, ...]
    num_att_values: tuple[int, ...]
    attribute_names: tuple[str, ...]
    class_index: int
    num_instances: int
    num_classes: int

    @property
    def num_attributes(self) -> int:
        return len(self.start_index)

    def prior(self) -> np.ndarray:
        """Add-one smoothed class prior."""
        return (self.class_counts + 1.0) / (self.num_instances + self.num_classes)

    def conditional(self, class_value: int, attribute_index: int, value: int) -> float:
        """Add-one smoothed P(attribute = value | class)."""
        column = self._column(attribute_index, value)
        return float(
            (self.class_att_counts[class_value, column] + 1.0)
            / (self.class_counts[class_value] + self.num_att_values[attribute_index])
        )

    def _column(self, attribute_index: int, value: int) -> int:
        num_values = self.num_att_values[attribute_index]
        if not 0 <= value < num_values:
            raise UnseenValueError(self.attribute_names[attribute_index], value, num_values)
        return self.start_index[attribute_index] + value

    def distribution(self, row: RowProtocol) -> np.ndarray:
        """
        Posterior class distribution under the conditional independence assumption.

        The product of smoothed ratios is accumulated in log space and rescaled by
        its maximum before normalizing, which keeps many-attribute rows from
        underflowing to an all-zero vector.
        """
        check_row_length(row, self.num_attributes)
        attributes = [a for a in range(self.num_attributes) if a != self.class_index]
        columns = [self._column(a, row.value(a)) for a in attributes]
        num_values = np.array([self.num_att_values[a] for a in attributes], dtype=np.float64)

        likelihood = (self.class_att_counts[:, columns] + 1.0) / (
            self.class_counts[:, np.newaxis] + num_values[np.newaxis, :]
        )
        log_scores = np.log(self.prior()) + np.log(likelihood).sum(axis=1)
        return normalize(np.exp(log_scores - log_scores.max()))


@register_model("NaiveBayes")
class NaiveBayesClassifier(NominalClassifier[CountTable]):
    """
    Naive Bayes with add-one smoothed frequency estimates.

    One pass over the training rows fills the class and class/attribute-value
    count tables; prediction is a closed-form product of smoothed ratios.
    """

    def _build(self, dataset: DatasetProtocol) -> CountTable:
        num_attributes = dataset.num_attributes
        class_index = dataset.class_index
        num_classes = dataset.num_classes

        start_index = []
        num_att_values = []
        total = 0
        for i in range(num_attributes):
            if i == class_index:
                start_index.append(-1)
                num_att_values.append(num_classes)
            else:
                num_values = dataset.attribute(i).num_values
                start_index.append(total)
                num_att_values.append(num_values)
                total += num_values

        matrix = as_matrix(dataset)
        classes = matrix[:, class_index]
        class_counts = np.bincount(classes, minlength=num_classes).astype(np.float64)
        class_att_counts = np.zeros((num_classes, total), dtype=np.float64)
        for i in range(num_attributes):
            if i != class_index:
                np.add.at(class_att_counts, (classes, start_index[i] + matrix[:, i]), 1.0)

        class_counts.setflags(write=False)
        class_att_counts.setflags(write=False)
        logger.debug(
            f"Built naive Bayes count table: {num_classes} classes x {total} attribute values"
        )
        return CountTable(
            class_counts,
            class_att_counts,
            tuple(start_index),
            tuple(num_att_values),
            tuple(dataset.attribute(i).name for i in range(num_attributes)),
            class_index,
            dataset.num_instances,
            num_classes,
        )
