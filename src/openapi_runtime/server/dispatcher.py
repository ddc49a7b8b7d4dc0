"""Dispatcher — selects a route and drives a request through its handler.

Routes are scanned in registration order; the first entry whose method
matches and whose pattern consumes the whole path wins. A pattern that
only matches a prefix of the path is skipped, so ``/users/{id}`` never
answers ``/users/7/avatar``.
"""

from dataclasses import dataclass
from typing import assert_never

from openapi_runtime._internal.invoke import invoke
from openapi_runtime.diagnostics import DiagnosticSink, default_sink
from openapi_runtime.http.request import TransportRequest
from openapi_runtime.http.response import (
    OperationFailure,
    OperationResponse,
    TransportResponse,
)
from openapi_runtime.routing.method import OperationMethod
from openapi_runtime.routing.pattern import MatchResult
from openapi_runtime.routing.route import RouteConfig
from openapi_runtime.routing.table import RouteTable
from openapi_runtime.server.adapter import AsgiRequestView
from openapi_runtime.server.encoder import encode_response

NOT_FOUND_BODY = "Not Found."


@dataclass(frozen=True, slots=True)
class Selection:
    """The route chosen for a request and the match that chose it."""

    route: RouteConfig
    match: MatchResult


def normalize_path(path: str) -> str:
    """Ensure *path* starts with exactly one ``/``."""
    return "/" + path.lstrip("/")


class Dispatcher:
    """Routes transport requests to operation handlers.

    Stateless across requests; safe to share between concurrent tasks.

    Usage::

        dispatcher = Dispatcher(router.build())
        response = await dispatcher.dispatch(request)
    """

    __slots__ = ("_diagnostics", "_table")

    def __init__(self, table: RouteTable, diagnostics: DiagnosticSink | None = None) -> None:
        self._table = table
        self._diagnostics = diagnostics or default_sink()

    @property
    def table(self) -> RouteTable:
        return self._table

    def select(self, method: str, path: str) -> Selection | None:
        """Find the first route fully matching *method* and *path*.

        *path* is the raw (still percent-encoded) request path.
        """
        operation = OperationMethod.parse(method)
        if operation is None:
            return None

        url = normalize_path(path)
        for route in self._table:
            if route.method != operation:
                continue
            match = route.pattern.match(url)
            if match is None:
                continue
            # Prefix-only matches are ignored
            if not match.is_full:
                self._diagnostics.debug(
                    "%s does not match %s, remaining path: %r",
                    url,
                    route.pattern.template,
                    match.remainder,
                )
                continue
            return Selection(route=route, match=match)
        return None

    async def dispatch(self, request: TransportRequest) -> TransportResponse:
        """Select, invoke and encode. Unmatched requests get a 404."""
        self._diagnostics.debug("handling request. %s %s", request.method, request.url)

        selection = self.select(request.method, request.raw_path)
        if selection is None:
            return TransportResponse.plain_text(404, NOT_FOUND_BODY)

        view = AsgiRequestView(request, selection.match, request.cookies)
        result = await invoke(selection.route.handler, view)

        match result:
            case OperationResponse():
                return encode_response(result)
            case OperationFailure(status=status, message=message):
                self._diagnostics.debug(
                    "%s returned failure %d: %s", selection.route, status, message
                )
                return TransportResponse.plain_text(status, message)
            case _:
                assert_never(result)
