"""
Nominal classifier factory.
"""

from typing import Any

from omegaconf import DictConfig

from ..configs.base import deep_sanitize
from ..configs.model import CONFIG_CLASSES, ClassifierConfig
from ..utils.validation import validate_config
from .base import NominalClassifier
from .registry import get_model

# Names accepted by `create_model`
MODEL_NAMES = list(CONFIG_CLASSES)


@validate_config(CONFIG_CLASSES)
def create_model(cfg: ClassifierConfig | dict[str, Any] | DictConfig) -> NominalClassifier:
    """
    Factory function to create nominal classifiers.

    Args:
        cfg: A classifier config, or a mapping with a `name` key and the
            classifier's hyperparameters. Its keys must be fields of the
            config class registered under that name.

    Returns:
        An untrained classifier.
    """
    if isinstance(cfg, DictConfig):
        cfg = deep_sanitize(cfg)
    if isinstance(cfg, dict):
        cfg = CONFIG_CLASSES[cfg["name"]].from_dict(cfg)

    model_cls = get_model(cfg.name)
    return model_cls(**cfg.model_kwargs())
