"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import ConfigurationError
from ..schemas.config import load_config


def load_settings(path: str | Path) -> dict[str, Any]:
    """Read a YAML config file and return validated container settings."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    try:
        return load_config(raw).to_settings()
    except PydanticValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration in {path}",
            context={"errors": exc.errors()},
        ) from exc


__all__ = ["load_settings"]
