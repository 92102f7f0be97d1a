"""Logging setup for prnotify.

Two levels are applied:
- ``logging.level`` for the ``prnotify`` logger tree (handlers, notifier,
  webhook server)
- ``logging.root_level`` for everything else (requests, urllib3), WARNING by
  default so Slack API traffic does not flood the log

Both accept DEBUG, INFO, WARNING or ERROR (env: LOGGING_LEVEL,
LOGGING_ROOT_LEVEL); anything else falls back to the default for that level.
"""

import logging

from prnotify.config import LoggingConfig

LOGGER_NAME = "prnotify"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_ROOT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str, default: str = DEFAULT_LEVEL) -> int:
    return LEVELS.get(level.upper().strip(), LEVELS[default])


class PRNotifyLogging:
    """Applies LoggingConfig to the root and ``prnotify`` loggers."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._root_level = _resolve_level(config.root_level, DEFAULT_ROOT_LEVEL)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> None:
        logging.basicConfig(level=self._root_level, format=self._format, force=True)
        logging.getLogger(LOGGER_NAME).setLevel(self._level)
