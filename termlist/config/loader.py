import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from termlist.config.schema import VirtualListConfig
from termlist.constants import CONFIG_SECTION, DEFAULT_CONFIG_PATH, ENV_CONFIG_PATH, ENV_DOTENV_PATH
from termlist.utils import expand_env_vars

logger = logging.getLogger(__name__)


def _warn_unknown_keys(model: BaseModel, path: str, config_path: Path) -> None:
    """Recursively warn about unknown keys in a model and its nested models."""
    if hasattr(model, "model_extra") and model.model_extra:
        logger.warning("Unknown keys in %s at %s: %s", path, config_path, list(model.model_extra.keys()))

    for field_name, field_value in model.__dict__.items():
        if isinstance(field_value, BaseModel):
            _warn_unknown_keys(field_value, f"{path}.{field_name}", config_path)


def load_config(path: Path) -> VirtualListConfig:
    """Load and validate list configuration from a YAML file.

    The file may hold the options at top level or under a ``virtual_list:``
    section. A missing or unreadable file yields the defaults; invalid values
    raise pydantic's ValidationError.

    Args:
        path: Path to the termlist.yml file.

    Returns:
        The validated configuration model.
    """
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return VirtualListConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read config file %s: %s", path, e)
        return VirtualListConfig()

    if not isinstance(raw, dict):
        logger.warning("Config file %s does not contain a mapping, using defaults", path)
        return VirtualListConfig()

    section = raw.get(CONFIG_SECTION, raw)
    if not isinstance(section, dict):
        logger.warning("Section '%s' in %s is not a mapping, using defaults", CONFIG_SECTION, path)
        return VirtualListConfig()

    expanded = expand_env_vars(section)
    model = VirtualListConfig.model_validate(expanded)
    _warn_unknown_keys(model, CONFIG_SECTION, path)
    return model


def resolve_config_path(path: Optional[Path] = None) -> Path:
    """Pick the config path: explicit argument, then $TERMLIST_CONFIG, then the default."""
    if path is not None:
        return path.expanduser()
    env_path = os.getenv(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()
    return Path(DEFAULT_CONFIG_PATH).expanduser()


def load_settings(path: Optional[Path] = None) -> VirtualListConfig:
    """Load .env (for $TERMLIST_CONFIG and ${VAR} expansion), then the config file."""
    dotenv_path = os.getenv(ENV_DOTENV_PATH)
    if dotenv_path:
        load_dotenv(Path(dotenv_path).expanduser())
    else:
        load_dotenv()
    return load_config(resolve_config_path(path))
