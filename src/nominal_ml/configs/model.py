from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nominal_ml.configs.base import BaseConfig
from nominal_ml.utils.functions.probability import EPSILON

__all__ = [
    "ClassifierConfig",
    "ID3Config",
    "KNNConfig",
    "NaiveBayesConfig",
    "CONFIG_CLASSES",
]


@dataclass
class ClassifierConfig(BaseConfig):
    name: str = "base"

    def model_kwargs(self) -> dict[str, Any]:
        """Constructor arguments for the classifier this config describes."""
        kwargs = self.to_dict()
        kwargs.pop("name")
        return kwargs


@dataclass
class ID3Config(ClassifierConfig):
    name: str = "ID3"
    epsilon: float = EPSILON


@dataclass
class KNNConfig(ClassifierConfig):
    name: str = "KNN"
    k: int = 3


@dataclass
class NaiveBayesConfig(ClassifierConfig):
    name: str = "NaiveBayes"


CONFIG_CLASSES: dict[str, type[ClassifierConfig]] = {
    "ID3": ID3Config,
    "KNN": KNNConfig,
    "NaiveBayes": NaiveBayesConfig,
}
