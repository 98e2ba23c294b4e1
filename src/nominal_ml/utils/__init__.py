"""Utility package."""

from .functions import (
    EPSILON,
    entropy,
    guarded_log2,
    information_gain,
    laplace_distribution,
    normalize,
)
from .registry import MODEL_REGISTRY, Registry, register_model
from .validation import validate_config

__all__ = [
    "EPSILON",
    "MODEL_REGISTRY",
    "Registry",
    "entropy",
    "guarded_log2",
    "information_gain",
    "laplace_distribution",
    "normalize",
    "register_model",
    "validate_config",
]
