"""Configuration management.

Options are validated by pydantic and loaded from YAML:
    from termlist.config import load_settings
"""

from termlist.config.loader import load_config, load_settings, resolve_config_path
from termlist.config.schema import VirtualListConfig

__all__ = ["VirtualListConfig", "load_config", "load_settings", "resolve_config_path"]
