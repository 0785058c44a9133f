"""termlist logging configuration.

Every module logs through ``logging.getLogger(__name__)`` under the
``termlist`` namespace. Nothing is configured at import time: applications
(and the bundled CLI) call :func:`setup_logging` once at startup.

The level comes from ``TERMLIST_LOG_LEVEL`` (default ``WARNING``). While a
Textual app owns the terminal, stderr output would corrupt the screen, so
setup_logging(textual=True) routes records to Textual's log (``textual
console``) unless ``TERMLIST_LOG_FILE`` names a file.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from termlist.constants import ENV_LOG_FILE, ENV_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None, *, textual: bool = False
) -> logging.Logger:
    """Configure termlist logging.

    Args:
        level: Optional override for `TERMLIST_LOG_LEVEL`.
        log_file: Optional override for `TERMLIST_LOG_FILE`.
        textual: Log through Textual instead of stderr when no file is set.

    Returns:
        The configured ``termlist`` root logger.
    """
    if level:
        os.environ[ENV_LOG_LEVEL] = level
    if log_file:
        os.environ[ENV_LOG_FILE] = log_file

    level_name = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    resolved = logging.getLevelName(level_name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    target = os.environ.get(ENV_LOG_FILE)
    handler: logging.Handler
    if target:
        handler = logging.FileHandler(os.path.expanduser(target), encoding="utf-8")
    elif textual:
        from textual.logging import TextualHandler

        handler = TextualHandler()
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("termlist")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return logger
