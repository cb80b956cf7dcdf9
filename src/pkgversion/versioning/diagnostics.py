"""Diagnostic sink used to report anomalies found in version resources."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..common.logging_utils import extra_context

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Receives warning and error messages about a namespace.

    ``message`` is a %-style template with a single ``%s`` for the namespace.
    """

    def warning(self, message: str, namespace: str) -> None:
        ...

    def error(self, message: str, namespace: str) -> None:
        ...


class LoggingDiagnostics:
    """Diagnostic sink that forwards to a stdlib logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._logger = log or logger

    def warning(self, message: str, namespace: str) -> None:
        self._logger.warning(message, namespace, extra=extra_context(
            event="anomaly", component="resolver", namespace=namespace
        ))

    def error(self, message: str, namespace: str) -> None:
        self._logger.error(message, namespace, extra=extra_context(
            event="resolution_failed", component="resolver", namespace=namespace
        ))
