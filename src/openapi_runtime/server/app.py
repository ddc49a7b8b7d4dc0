"""OpenApiServer — the ASGI application around the dispatcher.

The only component that touches raw ASGI directly. Converts scope dicts to
``TransportRequest`` objects, runs them through the middleware pipeline
and the dispatcher, and sends the ``TransportResponse`` back.
"""

from collections.abc import Sequence

from openapi_runtime._internal.asgi import Receive, Scope, Send
from openapi_runtime.config import ServerConfig
from openapi_runtime.diagnostics import DiagnosticSink, default_sink
from openapi_runtime.errors import ResponseError
from openapi_runtime.http.request import TransportRequest
from openapi_runtime.http.response import TransportResponse
from openapi_runtime.middleware.access_log import AccessLog
from openapi_runtime.middleware.cookies import cookie_parser
from openapi_runtime.middleware.protocol import Middleware, Next
from openapi_runtime.routing.table import RouteTable, Router
from openapi_runtime.server.dispatcher import Dispatcher
from openapi_runtime.server.lifecycle import StoppableProcess, serve
from openapi_runtime.server.sender import send_response


class OpenApiServer:
    """Serves a route table over ASGI.

    Usage::

        server = OpenApiServer(router)

        # Under any ASGI server
        uvicorn.run(server)

        # Or managed from async code
        process = await server.start_server(port=8080)
        ...
        await process.stop("shutdown requested")

    The pipeline is: cookie parser, access log, then the error boundary
    around user middleware and the dispatcher. ``ResponseError`` raised by
    user middleware or a handler becomes a plain-text response; any other
    exception is logged and re-raised.
    """

    __slots__ = ("_diagnostics", "_guarded", "_pipeline", "config", "dispatcher")

    def __init__(
        self,
        routes: Router | RouteTable,
        config: ServerConfig | None = None,
        *,
        diagnostics: DiagnosticSink | None = None,
        middleware: Sequence[Middleware] = (),
    ) -> None:
        self.config = config or ServerConfig()
        self._diagnostics = diagnostics or default_sink()
        table = routes.build() if isinstance(routes, Router) else routes
        self.dispatcher = Dispatcher(table, self._diagnostics)

        stages: list[Middleware] = []
        if self.config.parse_cookies:
            stages.append(cookie_parser)
        if self.config.access_log:
            stages.append(AccessLog(diagnostics))
        self._guarded = _chain(tuple(middleware), self.dispatcher.dispatch)
        self._pipeline = _chain(tuple(stages), self._handle_request_with_exceptions)

    async def _handle_request_with_exceptions(
        self, request: TransportRequest
    ) -> TransportResponse:
        try:
            return await self._guarded(request)
        except ResponseError as exc:
            self._diagnostics.debug(
                "response exception during request handling", exc_info=True
            )
            return TransportResponse.plain_text(exc.status, exc.message)
        except Exception:
            self._diagnostics.warning("Error while handling request.", exc_info=True)
            raise

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        if scope["type"] != "http":
            return

        request = TransportRequest.from_asgi(scope, receive)
        response = await self._pipeline(request)
        await send_response(response, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Acknowledge the ASGI lifespan protocol; no startup work is needed."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                self._diagnostics.debug("routes: %s", [str(r) for r in self.dispatcher.table])
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Lifecycle --

    async def start_server(
        self,
        host: str | None = None,
        port: int | None = None,
    ) -> StoppableProcess:
        """Start serving in the running event loop.

        Returns once the listener is bound. Pass ``port=0`` for an
        ephemeral port; the bound port is on the returned process.
        """
        return await serve(
            self,
            self.config.host if host is None else host,
            self.config.port if port is None else port,
            config=self.config,
            diagnostics=self._diagnostics,
        )

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve until interrupted. Blocks the calling thread."""
        import uvicorn

        uvicorn.run(
            self,
            host=self.config.host if host is None else host,
            port=self.config.port if port is None else port,
            log_level=self.config.log_level,
            access_log=self.config.uvicorn_access_log,
        )


def _chain(stages: tuple[Middleware, ...], handler: Next) -> Next:
    """Wrap *handler* so that ``stages[0]`` runs first."""
    for mw in reversed(stages):
        inner = handler

        async def make_next(
            request: TransportRequest,
            _mw: Middleware = mw,
            _next: Next = inner,
        ) -> TransportResponse:
            return await _mw(request, _next)

        handler = make_next
    return handler
