"""ID3 decision tree over nominal attributes."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from ...data.dataset import (
    DatasetProtocol,
    NominalDataset,
    RowProtocol,
    as_matrix,
    check_row_length,
)
from ...exceptions import ConfigurationError, UnseenValueError
from ...utils.functions.probability import EPSILON, information_gain, laplace_distribution
from ..base import NominalClassifier
from ..registry import register_model

logger = logging.getLogger(__name__)

__all__ = ["Leaf", "Internal", "TreeNode", "DecisionTree", "ID3Classifier"]


@dataclass(frozen=True, eq=False)
class Leaf:
    """Terminal node holding a smoothed class distribution."""

    distribution: np.ndarray
    num_instances: int


@dataclass(frozen=True, eq=False)
class Internal:
    """Decision node with one child per value of its split attribute."""

    attribute_index: int
    attribute_name: str
    children: tuple[TreeNode, ...]
    num_instances: int


TreeNode = Leaf | Internal


@dataclass(frozen=True, eq=False)
class DecisionTree:
    """
    A trained ID3 tree.

    The tree is immutable; retraining an `ID3Classifier` builds a new one.
    """

    root: TreeNode
    num_attributes: int
    class_index: int
    num_classes: int

    def distribution(self, row: RowProtocol) -> np.ndarray:
        """
        Follow the row's values from the root to a leaf.

        Raises:
            UnseenValueError: If the row's value for a split attribute has no child.
        """
        check_row_length(row, self.num_attributes)
        node = self.root
        while isinstance(node, Internal):
            value = row.value(node.attribute_index)
            if not 0 <= value < len(node.children):
                raise UnseenValueError(node.attribute_name, value, len(node.children))
            node = node.children[value]
        return node.distribution.copy()

    def nodes(self) -> Iterator[tuple[TreeNode, int]]:
        """Yield every node with its depth, depth-first in value order."""
        stack: list[tuple[TreeNode, int]] = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if isinstance(node, Internal):
                stack.extend((child, depth + 1) for child in reversed(node.children))

    @property
    def num_nodes(self) -> int:
        return sum(1 for _ in self.nodes())

    @property
    def num_leaves(self) -> int:
        return sum(1 for node, _ in self.nodes() if isinstance(node, Leaf))

    @property
    def depth(self) -> int:
        return max(depth for _, depth in self.nodes())

    def describe(self, dataset: NominalDataset | None = None) -> str:
        """
        Render the tree as text, one line per branch.

        With a dataset, value and class labels come from its header; otherwise
        value indices are printed.

        Example:
            outlook = sunny
            |  humidity = high: no [0.2000, 0.8000]
        """
        if isinstance(self.root, Leaf):
            return self._leaf_text(self.root, dataset).lstrip()

        lines: list[str] = []

        def visit(node: Internal, depth: int) -> None:
            attribute = dataset.attribute(node.attribute_index) if dataset is not None else None
            for value, child in enumerate(node.children):
                label = attribute.values[value] if attribute is not None else str(value)
                prefix = "|  " * depth + f"{node.attribute_name} = {label}"
                if isinstance(child, Leaf):
                    lines.append(prefix + ":" + self._leaf_text(child, dataset))
                else:
                    lines.append(prefix)
                    visit(child, depth + 1)

        visit(self.root, 0)
        return "\n".join(lines)

    def _leaf_text(self, leaf: Leaf, dataset: NominalDataset | None) -> str:
        best = int(np.argmax(leaf.distribution))
        if dataset is not None:
            name = dataset.attribute(self.class_index).values[best]
        else:
            name = str(best)
        probs = ", ".join(f"{p:.4f}" for p in leaf.distribution)
        return f" {name} [{probs}]"


class _TreeBuilder:
    """Recursive ID3 induction over index arrays into a value matrix."""

    def __init__(self, dataset: DatasetProtocol, epsilon: float) -> None:
        self.matrix = as_matrix(dataset)
        self.class_index = dataset.class_index
        self.classes = self.matrix[:, self.class_index]
        self.num_classes = dataset.num_classes
        self.epsilon = epsilon
        self.candidates = [i for i in range(dataset.num_attributes) if i != self.class_index]
        self.names = {i: dataset.attribute(i).name for i in self.candidates}
        self.num_values = {i: dataset.attribute(i).num_values for i in self.candidates}

    def leaf(self, indices: np.ndarray) -> Leaf:
        distribution = laplace_distribution(self.classes[indices], self.num_classes)
        distribution.setflags(write=False)
        return Leaf(distribution, len(indices))

    def make_tree(self, indices: np.ndarray) -> TreeNode:
        # Empty partitions become uniform leaves.
        if len(indices) == 0:
            return self.leaf(indices)

        labels = self.classes[indices]
        best_attribute = None
        best_gain = 0.0
        for attribute in self.candidates:
            gain = information_gain(
                self.matrix[indices, attribute],
                labels,
                self.num_values[attribute],
                self.num_classes,
                self.epsilon,
            )
            # Strict comparison: the first attribute wins ties.
            if gain > best_gain:
                best_gain = gain
                best_attribute = attribute

        if best_attribute is None or abs(best_gain) < self.epsilon:
            return self.leaf(indices)

        column = self.matrix[indices, best_attribute]
        children = tuple(
            self.make_tree(indices[column == value])
            for value in range(self.num_values[best_attribute])
        )
        return Internal(best_attribute, self.names[best_attribute], children, len(indices))


@register_model("ID3")
class ID3Classifier(NominalClassifier[DecisionTree]):
    """
    Iterative Dichotomiser 3 (ID3).

    Splits on the attribute of maximum information gain until the gain vanishes,
    creating one child per declared attribute value. Leaves hold add-one smoothed
    class distributions so that pure leaves never predict probability 0.
    """

    def __init__(self, epsilon: float = EPSILON) -> None:
        """
        Initialize the ID3 classifier.

        Args:
            epsilon (float, optional): Gains and frequencies below this count as zero.
                Defaults to 1e-6.
        """
        super().__init__()
        if not epsilon > 0:
            raise ConfigurationError(f"epsilon must be positive, got {epsilon}.")
        self.epsilon = epsilon

    def _build(self, dataset: DatasetProtocol) -> DecisionTree:
        builder = _TreeBuilder(dataset, self.epsilon)
        root = builder.make_tree(np.arange(dataset.num_instances))
        tree = DecisionTree(root, dataset.num_attributes, dataset.class_index, dataset.num_classes)
        logger.debug(
            f"Built ID3 tree: {tree.num_nodes} nodes, {tree.num_leaves} leaves, depth {tree.depth}"
        )
        return tree
