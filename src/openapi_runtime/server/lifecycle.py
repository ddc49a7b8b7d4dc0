"""Start a uvicorn listener and stop it on demand.

``serve`` binds the socket itself, so a port already in use raises
``OSError`` here instead of terminating the process.
"""

import asyncio
import socket
from collections.abc import Awaitable, Callable

import anyio
import uvicorn

from openapi_runtime._internal.asgi import ASGIApp
from openapi_runtime.config import ServerConfig
from openapi_runtime.diagnostics import DiagnosticSink, default_sink


class StoppableProcess:
    """Handle to a running server.

    ``stop(reason)`` shuts the listener down and waits for in-flight
    requests; calling it again is a no-op. ``wait()`` returns once stopped.
    """

    __slots__ = ("_stop", "_stopped", "_stopping", "host", "port")

    def __init__(
        self,
        stop: Callable[[str], Awaitable[None]],
        *,
        host: str,
        port: int,
    ) -> None:
        self._stop = stop
        self._stopping = False
        self._stopped = anyio.Event()
        self.host = host
        self.port = port

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    async def stop(self, reason: str = "stop requested") -> None:
        if self._stopping:
            await self._stopped.wait()
            return
        self._stopping = True
        try:
            await self._stop(reason)
        finally:
            self._stopped.set()

    async def wait(self) -> None:
        await self._stopped.wait()


def _bind(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


async def serve(
    app: ASGIApp,
    host: str,
    port: int,
    *,
    config: ServerConfig | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> StoppableProcess:
    """Start *app* under uvicorn in the running event loop."""
    config = config or ServerConfig()
    log = diagnostics or default_sink()

    sock = _bind(host, port)
    bound_host, bound_port = sock.getsockname()[:2]

    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=host,
            port=bound_port,
            log_level=config.log_level,
            access_log=config.uvicorn_access_log,
        )
    )
    task = asyncio.create_task(server.serve(sockets=[sock]))

    while not server.started:
        if task.done():
            sock.close()
            task.result()
            msg = f"Server on {host}:{bound_port} exited during startup."
            raise RuntimeError(msg)
        await anyio.sleep(0.01)

    log.info("Serving at http://%s:%s", bound_host, bound_port)

    async def stop(reason: str) -> None:
        log.info("Stopping server... (%s)", reason)
        server.should_exit = True
        try:
            await task
        finally:
            sock.close()
        log.info("Successfully stopped server.")

    return StoppableProcess(stop, host=bound_host, port=bound_port)
