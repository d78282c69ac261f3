from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class ConfigError(Exception):
    """Raised when a config file exists but cannot be loaded."""


class Config:
    """Configuration manager for chezdesk.

    Values from the user's YAML file are deep-merged over DEFAULT_CONFIG,
    so a file only needs the keys it wants to change.
    """

    DEFAULT_CONFIG = {
        "chezmoi": {
            "binary": "chezmoi",
            "source": None,
            "config": None,
            "include": "files",
            "upstream": "@{upstream}",
            "force": True,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        # Use deepcopy to avoid mutating the class-level DEFAULT_CONFIG
        self.data = copy.deepcopy(self.DEFAULT_CONFIG)
        self.path = config_path

        if config_path and config_path.exists():
            try:
                with open(config_path, "r") as f:
                    user_config = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Could not load {config_path}: {e}")

            if user_config is not None and not isinstance(user_config, dict):
                raise ConfigError(
                    f"Could not load {config_path}: expected a mapping"
                )
            if user_config:
                self._deep_update(self.data, user_config)

    def _deep_update(self, base: Dict, update: Dict):
        for k, v in update.items():
            if isinstance(v, dict) and k in base and isinstance(base[k], dict):
                self._deep_update(base[k], v)
            else:
                base[k] = v

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a config value by dot-separated path."""
        keys = key_path.split(".")
        value = self.data
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def get_bool(self, key_path: str, default: bool) -> bool:
        """Get a boolean value; quoted strings like "false" are rejected."""
        value = self.get(key_path, default)
        if value is None:
            return default
        if not isinstance(value, bool):
            raise ConfigError(
                f"{key_path} must be true or false, got {value!r}"
            )
        return value

    def get_global_args(self) -> List[str]:
        """Flags placed before every chezmoi subcommand."""
        args: List[str] = []
        source = self.get("chezmoi.source")
        if source:
            args.extend(["--source", str(Path(source).expanduser())])
        config_file = self.get("chezmoi.config")
        if config_file:
            args.extend(["--config", str(Path(config_file).expanduser())])
        return args
