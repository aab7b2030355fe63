"""Debug logging for the game tools."""

from __future__ import annotations

import logging


class ChibiLog:
    """Writes informational messages to a debug logger."""

    def __init__(self, name: str = "chibitools") -> None:
        self.logger = logging.getLogger(name)

    def info(self, content: str) -> None:
        """Record a message at debug level."""
        self.logger.debug("%s", content)