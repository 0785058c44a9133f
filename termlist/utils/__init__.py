"""Utility functions for termlist."""

from __future__ import annotations

import os
import re


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into [lower, upper].

    When the range is empty (upper < lower) the lower bound wins, which is what
    the viewport math wants for empty lists.
    """
    return max(lower, min(value, upper))


def expand_env_vars(config: object) -> object:
    """Recursively expand environment variables in config.

    Replaces ${VAR} patterns with environment variable values.

    Args:
        config: Configuration object (dict, list, str, or primitive)

    Returns:
        Configuration with all ${VAR} patterns replaced
    """
    if isinstance(config, dict):
        return {k: expand_env_vars(v) for k, v in config.items()}  # type: ignore[misc]
    if isinstance(config, list):
        return [expand_env_vars(item) for item in config]
    if isinstance(config, str):

        def replace_env_var(match: re.Match[str]) -> str:
            env_var = match.group(1)
            return os.getenv(env_var, match.group(0))

        return re.sub(r"\$\{([^}]+)\}", replace_env_var, config)
    return config
