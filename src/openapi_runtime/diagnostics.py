"""Diagnostic sink protocol.

Components that log take a sink explicitly instead of reaching for a
module-level logger. Any ``logging.Logger`` satisfies the protocol.
"""

import logging
from typing import Any, Protocol


class DiagnosticSink(Protocol):
    """Severity-leveled log operations, shaped like ``logging.Logger``."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


def default_sink(name: str = "openapi_runtime.server") -> DiagnosticSink:
    """Return the stdlib logger used when no sink is injected."""
    return logging.getLogger(name)
