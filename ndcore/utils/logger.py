from __future__ import annotations

import logging

from rich.logging import RichHandler

LOGGER = logging.getLogger("ndcore")
"""
Logger to be used across the codebase.

:meta hide-value:
"""


def start_logger(log_level: int) -> None:
    """
    Configure :data:`LOGGER` to render its messages with rich.

    Handlers attached by earlier calls are replaced, so calling this repeatedly only changes the level.

    Args:
        log_level: minimum level to log, e.g. :data:`logging.DEBUG`

    """
    LOGGER.handlers.clear()
    LOGGER.addHandler(RichHandler(level=log_level))
    LOGGER.setLevel(log_level)
