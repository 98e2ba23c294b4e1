"""
Count-based probability helpers shared by the nominal classifiers.
"""

import math

import numpy as np

# Frequencies below this are treated as zero.
EPSILON = 1e-6


def guarded_log2(numerator: float, denominator: float = 1.0, epsilon: float = EPSILON) -> float:
    """
    Base-2 logarithm of a fraction, returning 0 when either part is below epsilon.

    This makes `0 * log2(0)` contribute nothing to an entropy sum.
    """
    if numerator < epsilon or denominator < epsilon:
        return 0.0
    return math.log2(numerator / denominator)


def class_counts(class_values: np.ndarray, num_classes: int) -> np.ndarray:
    """Count occurrences of each class index."""
    return np.bincount(np.asarray(class_values, dtype=np.int64), minlength=num_classes).astype(
        np.float64
    )


def entropy(class_values: np.ndarray, num_classes: int, epsilon: float = EPSILON) -> float:
    """
    Shannon entropy (bits) of the empirical class distribution.

    Args:
        class_values: Class indices of a row set.
        num_classes: Size of the class domain.
        epsilon: Frequencies below this contribute nothing.

    Returns:
        float: 0 for an empty or class-pure set, at most log2(num_classes).
    """
    n = len(class_values)
    if n == 0:
        return 0.0
    frequencies = class_counts(class_values, num_classes) / n
    return -sum(p * guarded_log2(p, 1.0, epsilon) for p in frequencies.tolist())


def information_gain(
    attribute_values: np.ndarray,
    class_values: np.ndarray,
    num_values: int,
    num_classes: int,
    epsilon: float = EPSILON,
) -> float:
    """
    Reduction in class entropy from partitioning a row set on one attribute.

    Args:
        attribute_values: The attribute's value index for each row.
        class_values: The class index for each row.
        num_values: Size of the attribute's domain.
        num_classes: Size of the class domain.
        epsilon: Passed through to `entropy`.

    Returns:
        float: The information gain, never negative.
    """
    n = len(class_values)
    if n == 0:
        return 0.0
    gain = entropy(class_values, num_classes, epsilon)
    for value in range(num_values):
        mask = attribute_values == value
        count = int(np.count_nonzero(mask))
        if count:
            gain -= count / n * entropy(class_values[mask], num_classes, epsilon)
    return max(gain, 0.0)


def normalize(probs: np.ndarray) -> np.ndarray:
    """Scale a non-negative vector to sum to one."""
    total = float(np.sum(probs))
    if not math.isfinite(total) or total <= 0.0:
        raise ValueError(f"Cannot normalize a vector with sum {total}.")
    return np.asarray(probs, dtype=np.float64) / total


def laplace_distribution(class_values: np.ndarray, num_classes: int) -> np.ndarray:
    """
    Add-one smoothed class distribution of a row set.

    `prob[c] = (count[c] + 1) / (n + num_classes)`, which is uniform for an
    empty set and strictly positive everywhere.
    """
    counts = class_counts(class_values, num_classes)
    probs = (counts + 1.0) / (len(class_values) + num_classes)
    return normalize(probs)
