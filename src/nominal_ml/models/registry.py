"""Classifier lookup by registered name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.registry import MODEL_REGISTRY, register_model

if TYPE_CHECKING:
    from .base import NominalClassifier


def get_model(name: str) -> type[NominalClassifier]:
    """Get a classifier class by its registered name."""
    return MODEL_REGISTRY.get(name)


def list_models() -> list[str]:
    """Registered classifier names, sorted."""
    return MODEL_REGISTRY.list_available()


__all__ = ["MODEL_REGISTRY", "register_model", "get_model", "list_models"]
