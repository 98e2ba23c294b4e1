from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from omegaconf import DictConfig

from ..exceptions import ConfigurationError, ModelNotFoundError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

def validate_config(schema: Any = None) -> Callable[[F], F]:
    """
    Decorator to validate configuration arguments.

    `schema` is either a config dataclass or a mapping from config name to config
    dataclass. When given, the config's keys (or fields) must all be fields of
    the schema. Otherwise only basic sanity checks run.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            # Find config in args or kwargs
            cfg = None
            if args:
                cfg = args[0]
            elif "cfg" in kwargs:
                cfg = kwargs["cfg"]
            elif "config" in kwargs:
                cfg = kwargs["config"]

            if cfg is not None:
                check_config(cfg, schema)

            return func(*args, **kwargs)
        return wrapper # type: ignore
    return decorator

def check_config(cfg: Any, schema: Any = None) -> None:
    """
    Validate a config object, optionally against a config dataclass.

    Raises:
        ConfigurationError: On a missing name, a non-config object or unknown keys.
        ModelNotFoundError: If `schema` is a mapping without an entry for the name.
    """
    if isinstance(cfg, (dict, DictConfig)):
        name = cfg.get("name")
        keys = set(cfg.keys())
    elif hasattr(cfg, "__dataclass_fields__"):
        name = getattr(cfg, "name", None)
        keys = set(cfg.__dataclass_fields__)
    else:
        raise ConfigurationError(
            f"Expected a config dataclass, dict or DictConfig, got {type(cfg).__name__}."
        )

    if not name:
        raise ConfigurationError("Config 'name' cannot be empty.")

    if isinstance(schema, Mapping):
        if name not in schema:
            raise ModelNotFoundError(
                f"Unknown model '{name}'. Available models: {', '.join(schema)}"
            )
        schema = schema[name]

    if schema is not None:
        logger.debug(f"Validating config against schema: {schema.__name__}")
        unknown = keys - set(schema.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(
                f"Unknown config keys for {schema.__name__}: {', '.join(sorted(unknown))}"
            )

__all__ = ["check_config", "validate_config"]
