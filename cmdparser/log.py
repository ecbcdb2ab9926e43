"""
Logging helpers shared by the parser and the demo program.

Importing the library never touches the root logger; applications (and the
demo program) call ``configure_logging`` themselves.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

LOG_FORMAT = "[%(levelname)s] %(name)s %(asctime)s | %(message)s"

logging.getLogger("cmdparser").addHandler(logging.NullHandler())


def resolve_level(level: Optional[str] = None) -> int:
    # explicit level > CMDPARSER_LOG_LEVEL > runtime config; unknown names fall back to WARNING
    name = level or os.environ.get("CMDPARSER_LOG_LEVEL", get_config().log_level)
    resolved = logging.getLevelName(str(name).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
