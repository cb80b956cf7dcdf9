"""Logging helpers shared across the package.

Library code only ever calls ``logging.getLogger(__name__)``; handlers are
installed by ``configure_logging`` when an application opts in.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from ..constants import Constants

_PACKAGE_LOGGER = "pkgversion"
_HANDLER_NAME = "pkgversion-default"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the package logger.

    The level comes from ``level``, then ``$PKGVERSION_LOG_LEVEL``, then
    ``Constants.LOG_LEVEL``. Calling this more than once only updates the level.
    """
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.LOG_LEVEL).upper()
    level_value = getattr(logging, level_name, logging.WARNING)

    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)
    pkg_logger.setLevel(level_value)
    for handler in pkg_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    pkg_logger.addHandler(handler)


def extra_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records.

    ``None`` values are dropped so records only carry populated keys.
    """
    return {k: v for k, v in kwargs.items() if v is not None}


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when debug records would be emitted by ``logger``."""
    return logger.isEnabledFor(logging.DEBUG)
