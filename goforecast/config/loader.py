"""YAML config loader."""

from pathlib import Path

import yaml

from goforecast.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the built-in defaults.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(**raw)


def resolve_state_dir(config: AppConfig, override: str | Path | None = None) -> Path:
    """Return the directory holding the state file.

    Precedence: explicit override, then config, then the home directory.
    """
    if override is not None:
        return Path(override).expanduser()
    if config.state.dir is not None:
        return config.state.dir.expanduser()
    return Path.home()
