from __future__ import annotations

from hydra.core.config_store import ConfigStore

from .base import BaseConfig, deep_sanitize
from .model import CONFIG_CLASSES, ClassifierConfig, ID3Config, KNNConfig, NaiveBayesConfig


def register_configs() -> None:
    """Register structured configs with Hydra ConfigStore."""
    cs = ConfigStore.instance()

    # Model configs
    cs.store(group="model", name="id3", node=ID3Config)
    cs.store(group="model", name="knn", node=KNNConfig)
    cs.store(group="model", name="naive_bayes", node=NaiveBayesConfig)


__all__ = [
    "register_configs",
    "deep_sanitize",
    "BaseConfig",
    "CONFIG_CLASSES",
    "ClassifierConfig",
    "ID3Config",
    "KNNConfig",
    "NaiveBayesConfig",
]
