"""
fuzzalg.config

Configuration for picking an algebra, either in code or from a YAML file:

  family: lukasiewicz
  stdneg: false
  na_rm: true

Unknown keys are rejected so that typos do not silently fall back to
defaults.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

from .algebra import Algebra, algebra
from .errors import ConfigError
from .tnorms import FAMILIES
from .utils import load_yaml

logger = logging.getLogger(__name__)


@dataclass
class AlgebraConfig:
    """
    Which algebra to build and how its norms treat missing values.
    """
    family: str = "goedel"
    stdneg: bool = False  # force the involutive negation
    na_rm: bool = False  # default missing policy of the norms

    def __post_init__(self):
        if self.family not in FAMILIES:
            raise ConfigError(
                f"Invalid family: {self.family!r}. Expected one of {', '.join(FAMILIES)}."
            )
        for name in ("stdneg", "na_rm"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean, got {getattr(self, name)!r}")

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "AlgebraConfig":
        if not isinstance(obj, dict):
            raise ConfigError(f"Config must be a mapping, got {type(obj).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(obj) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**obj)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def build(self) -> Algebra:
        return algebra(self.family, stdneg=self.stdneg, na_rm=self.na_rm)


def load_config(path: str | Path) -> AlgebraConfig:
    """
    Read an AlgebraConfig from a YAML file.
    """
    cfg = AlgebraConfig.from_dict(load_yaml(path))
    logger.debug("Loaded algebra config from %s: %s", path, cfg.to_dict())
    return cfg
