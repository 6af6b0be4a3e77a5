"\"\"\"YAML configuration loading.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigError(ValueError):
    """Raised when a configuration file cannot be parsed or validated."""


class ConfigManager:
    """YAML-backed configuration loader rooted at a base directory."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> AppConfig:
        """Load ``<base>/<name>.yaml`` and validate it."""
        return self.load_file(self._base_path / f"{name}.yaml")

    @staticmethod
    def load_file(path: str | Path) -> AppConfig:
        raw = _read_yaml(Path(path))
        try:
            return load_config(raw)
        except ValueError as exc:
            raise ConfigError(f"Invalid config {path}: {exc}") from exc


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        try:
            return yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


__all__ = ["ConfigError", "ConfigManager"]
