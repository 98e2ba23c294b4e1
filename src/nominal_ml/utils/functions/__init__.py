"""Numerical helper functions."""

from .probability import (
    EPSILON,
    class_counts,
    entropy,
    guarded_log2,
    information_gain,
    laplace_distribution,
    normalize,
)

__all__ = [
    "EPSILON",
    "class_counts",
    "entropy",
    "guarded_log2",
    "information_gain",
    "laplace_distribution",
    "normalize",
]
