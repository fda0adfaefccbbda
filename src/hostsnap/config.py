"""
Configuration management for Hostsnap.

Supports configuration via YAML files, environment variables, and programmatic access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PORT = 7878

DEFAULT_CONFIG_PATHS = [
    Path("/etc/hostsnap/config.yaml"),
    Path.home() / ".config" / "hostsnap" / "config.yaml",
    Path("hostsnap-config.yaml"),
]

# Nested YAML keys that do not match a field name once flattened
_NESTED_ALIASES = {
    ("logging", "level"): "log_level",
    ("logging", "file"): "log_file",
}


@dataclass
class Config:
    """
    Configuration container for Hostsnap.

    Priority (highest to lowest):
    1. Programmatic values passed to __init__ (and CLI flags)
    2. Environment variables (prefixed with HOSTSNAP_)
    3. Config file values
    4. Default values
    """

    # Server settings
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary."""
        # Flatten nested structure if present
        flat = {}
        for key, value in data.items():
            if isinstance(value, dict):
                for subkey, subvalue in value.items():
                    flat[_NESTED_ALIASES.get((key, subkey), subkey)] = subvalue
            else:
                flat[key] = value

        # Filter to only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in flat.items() if k in known_fields}

        if "port" in filtered:
            filtered["port"] = int(filtered["port"])

        return cls(**filtered)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """
        Load configuration with full resolution order.

        Args:
            config_path: Explicit path to config file. If None, searches
                        default locations.

        Returns:
            Fully resolved Config instance.
        """
        base_config: dict[str, Any] = {}

        if config_path:
            path = Path(config_path)
            if path.exists():
                with open(path) as f:
                    base_config = yaml.safe_load(f) or {}
        else:
            for path in DEFAULT_CONFIG_PATHS:
                if path.exists():
                    with open(path) as f:
                        base_config = yaml.safe_load(f) or {}
                    break

        config = cls.from_dict(base_config) if base_config else cls()

        config._apply_env_overrides()

        return config

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        env_mappings = {
            "HOSTSNAP_HOST": "host",
            "HOSTSNAP_PORT": "port",
            "HOSTSNAP_LOG_LEVEL": "log_level",
            "HOSTSNAP_LOG_FILE": "log_file",
        }

        for env_var, attr in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                current = getattr(self, attr)
                if isinstance(current, int):
                    try:
                        setattr(self, attr, int(value))
                    except ValueError:
                        raise ValueError(f"{env_var} must be an integer, got {value!r}") from None
                else:
                    setattr(self, attr, value)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "server": {
                "host": self.host,
                "port": self.port,
            },
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
            },
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
