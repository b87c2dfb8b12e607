"""Package logger.

Configure through the standard logging tree, e.g.
``logging.getLogger("gw2api").setLevel(logging.DEBUG)``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger("gw2api")
logger.setLevel(logging.WARNING)
logger.addHandler(logging.NullHandler())


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Attach a stream handler to the package logger and set its level."""
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
