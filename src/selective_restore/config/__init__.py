"""Configuration management: TOML loading and config models.

Usage:
    >>> from selective_restore.config import load_restore_config, RestoreConfig
"""

from selective_restore.config.loader import load_restore_config
from selective_restore.config.models import RestoreConfig

__all__ = ["load_restore_config", "RestoreConfig"]
