"""Name-to-class registry used to look classifiers up from configs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from ..exceptions import ModelNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["Registry", "MODEL_REGISTRY", "register_model"]


class Registry(Generic[T]):
    """
    Maps names to classes.

    Classes register themselves with the `register` decorator at import time.
    Registering a different class under a taken name replaces the entry and logs
    a warning.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._classes: dict[str, type[T]] = {}

    def register(self, name: str | None = None) -> Callable[[type[T]], type[T]]:
        """
        Decorator registering a class under `name` (defaults to the class name).
        """

        def decorator(cls: type[T]) -> type[T]:
            key = name or cls.__name__
            previous = self._classes.get(key)
            if previous is not None and previous is not cls:
                logger.warning(
                    f"Overwriting '{key}' in {self.kind} registry: "
                    f"{previous.__name__} -> {cls.__name__}"
                )
            self._classes[key] = cls
            return cls

        return decorator

    def get(self, name: str) -> type[T]:
        """
        Look a class up by name.

        Raises:
            ModelNotFoundError: If nothing is registered under `name`.
        """
        try:
            return self._classes[name]
        except KeyError:
            raise ModelNotFoundError(
                f"Unknown {self.kind.lower()} '{name}'. "
                f"Available: {', '.join(self.list_available())}"
            ) from None

    def create(self, name: str, **kwargs: Any) -> T:
        """Instantiate the class registered under `name`."""
        return self.get(name)(**kwargs)

    def list_available(self) -> list[str]:
        return sorted(self._classes)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_available())

    def __len__(self) -> int:
        return len(self._classes)


MODEL_REGISTRY: Registry[Any] = Registry("Model")

register_model = MODEL_REGISTRY.register
