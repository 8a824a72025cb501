"""
fuzzalg.utils

Small shared helpers.

Design principles:
  - Keep this file minimal.
  - No algebra here; only generic helpers.
  - Avoid circular imports (utils should not import the operator modules).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML file. An empty file yields an empty dict.
    """
    with Path(path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
