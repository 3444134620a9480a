"""Load selective restore configuration from TOML."""

import tomllib
from pathlib import Path

from selective_restore.config.models import RestoreConfig


def load_restore_config(config_path: Path | str) -> RestoreConfig:
    """Load restore configuration from a TOML file.

    Settings are read from the ``[restore]`` table; a file without one
    yields the defaults.

    Args:
        config_path: Path to the TOML file.

    Returns:
        RestoreConfig with the file's settings.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config format is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Restore config not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    restore_settings = data.get("restore", {})
    if not isinstance(restore_settings, dict):
        raise ValueError(f"[restore] must be a table in {config_path.name}")

    return RestoreConfig(**restore_settings)
