"""
Configuration loader for style_stats.

Settings come from at most one YAML or JSON file and from ``STYLE_STATS_*``
environment variables; the environment wins.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from ..exceptions import InvalidArgumentError
from .models import StyleStatsConfig

ENV_PREFIX = "STYLE_STATS_"

# Variable suffix -> path inside the configuration tree
ENV_VARIABLES: Dict[str, Tuple[str, ...]] = {
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FILE": ("logging", "file_path"),
    "LOG_FORMAT": ("logging", "format"),
    "TIMEOUT": ("fetch", "total_timeout"),
    "VERIFY_SSL": ("fetch", "verify_ssl"),
    "COMPRESS": ("fetch", "compress"),
    "MAX_CONCURRENT_REQUESTS": ("fetch", "max_concurrent_requests"),
    "USER_AGENT": ("fetch", "headers", "user_agent"),
}

_TRUE = ("true", "yes", "on")
_FALSE = ("false", "no", "off")


class ConfigLoader:
    """Loads StyleStatsConfig from a config file and the environment."""

    file_names = ("style_stats.yaml", "style_stats.yml", "style_stats.json")

    def __init__(self) -> None:
        home = Path.home() / ".style_stats"
        self.config_paths: List[Path] = [Path(name) for name in self.file_names]
        self.config_paths += [
            home / name.replace("style_stats", "config") for name in self.file_names
        ]
        self.env_prefix = ENV_PREFIX

    def load_config(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> StyleStatsConfig:
        """
        Build the configuration for one run.

        Args:
            config_file: File to read instead of searching the default
                        locations; it must exist

        Returns:
            Validated StyleStatsConfig

        Raises:
            InvalidArgumentError: If the file is missing, unreadable or holds
                                 invalid settings
        """
        path = self._find_file(config_file)
        data = self._parse_config_file(path) if path else {}
        data = self._deep_merge(data, self._load_from_environment())

        try:
            return StyleStatsConfig(**data)
        except ValidationError as e:
            source = path or "environment"
            raise InvalidArgumentError(f"Invalid configuration ({source}): {e}") from e

    def _find_file(self, config_file: Optional[Union[str, Path]]) -> Optional[Path]:
        if config_file:
            path = Path(config_file)
            if not path.exists():
                raise InvalidArgumentError(f"Config file not found: {path}")
            return path
        return next((path for path in self.config_paths if path.exists()), None)

    def _parse_config_file(self, path: Path) -> Dict[str, Any]:
        suffix = path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise InvalidArgumentError(f"Unsupported config file format: {path.suffix}")

        try:
            text = path.read_text(encoding="utf-8")
            data = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise InvalidArgumentError(f"Failed to parse config file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Config file {path} must hold a mapping")
        return data

    def _load_from_environment(self) -> Dict[str, Any]:
        config: Dict[str, Any] = {}
        for suffix, keys in ENV_VARIABLES.items():
            raw = os.environ.get(self.env_prefix + suffix)
            if raw is None:
                continue
            node = config
            for key in keys[:-1]:
                node = node.setdefault(key, {})
            node[keys[-1]] = self._convert_env_value(raw)
        return config

    def _convert_env_value(self, value: str) -> Any:
        """Turn booleans and numbers into their types; keep anything else."""
        if value.lower() in _TRUE:
            return True
        if value.lower() in _FALSE:
            return False
        for number in (int, float):
            try:
                return number(value)
            except ValueError:
                continue
        return value

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
