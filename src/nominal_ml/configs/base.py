from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, TypeVar

import yaml
from omegaconf import DictConfig, ListConfig, OmegaConf

T = TypeVar("T", bound="BaseConfig")

__all__ = ["BaseConfig", "deep_sanitize"]


@dataclass
class BaseConfig:
    """Base classifier configuration with YAML and dict conversion."""

    @classmethod
    def from_yaml(cls: type[T], path: str | Path) -> T:
        """Load a configuration from a YAML mapping."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Create a configuration from a mapping, ignoring keys that are not fields."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in deep_sanitize(data).items() if k in names})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Write the configuration as a YAML mapping."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)


def deep_sanitize(cfg: Any) -> Any:
    """Recursively convert DictConfig/ListConfig and tuples to plain containers."""
    if isinstance(cfg, (DictConfig, ListConfig)):
        return OmegaConf.to_container(cfg, resolve=True)
    if isinstance(cfg, dict):
        return {k: deep_sanitize(v) for k, v in cfg.items()}
    if isinstance(cfg, list | tuple):
        return [deep_sanitize(v) for v in cfg]
    return cfg
