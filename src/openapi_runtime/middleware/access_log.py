"""Access-log middleware.

Writes one line per request: timestamp, elapsed time, method, status and
target. Requests that fail with an exception are logged with ``[ERROR]``
in place of the status, then the exception propagates.
"""

import time
from datetime import UTC, datetime

from openapi_runtime.diagnostics import DiagnosticSink, default_sink
from openapi_runtime.http.request import TransportRequest
from openapi_runtime.http.response import TransportResponse
from openapi_runtime.middleware.protocol import Next


class AccessLog:
    """Log every request to a diagnostic sink at info level.

    Usage::

        server = OpenApiServer(router, middleware=(AccessLog(),))
    """

    __slots__ = ("sink",)

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.sink = sink or default_sink("openapi_runtime.access")

    async def __call__(self, request: TransportRequest, next: Next) -> TransportResponse:
        started = datetime.now(UTC)
        start = time.perf_counter()
        try:
            response = await next(request)
        except Exception:
            self._log(started, start, request, "[ERROR]")
            raise
        self._log(started, start, request, str(response.status))
        return response

    def _log(
        self,
        started: datetime,
        start: float,
        request: TransportRequest,
        outcome: str,
    ) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000
        self.sink.info(
            "%s %8.2fms %-7s [%s] %s",
            started.isoformat(timespec="seconds"),
            elapsed_ms,
            request.method,
            outcome,
            request.url,
        )
