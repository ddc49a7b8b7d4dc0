"""Immutable transport request.

Frozen metadata with async, single-use body access. This is the inbound
transport boundary: the ASGI scope is translated here once, and nothing
past this module touches the raw scope.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import quote

from openapi_runtime._internal.asgi import HTTPScope, Receive, Scope
from openapi_runtime.errors import BodyConsumedError
from openapi_runtime.http.content_type import ContentType
from openapi_runtime.http.cookies import EMPTY_JAR, CookieJar
from openapi_runtime.http.headers import Headers
from openapi_runtime.http.query import QueryParams

# Characters left alone when re-encoding an already decoded path
_PATH_SAFE = "/:@!$&'()*+,;=-._~"


@dataclass(frozen=True, slots=True)
class TransportRequest:
    """An immutable HTTP request as delivered by the ASGI server.

    ``path`` is decoded; ``raw_path`` keeps percent-escapes so path
    parameters are decoded exactly once, after matching.

    ``cookies`` is empty until the cookie-parser middleware attaches a jar
    with ``with_cookies``.
    """

    method: str
    path: str
    raw_path: str
    headers: Headers
    query: QueryParams
    http_version: str = "1.1"
    client: tuple[str, int] | None = None
    cookies: CookieJar = EMPTY_JAR

    # Private: ASGI receive callable for body streaming
    _receive: Receive | None = field(default=None, repr=False, compare=False)

    # Private: mutable consumption marker shared by copies of this request
    # (dict contents are mutable even though the field reference is frozen)
    _state: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def content_type(self) -> ContentType | None:
        """The parsed Content-Type header, or ``None`` if absent or invalid."""
        value = self.headers.get("content-type")
        if not value:
            return None
        try:
            return ContentType.parse(value)
        except ValueError:
            return None

    @property
    def charset(self) -> str:
        """Body text encoding declared by the client, UTF-8 by default."""
        content_type = self.content_type
        return (content_type and content_type.charset) or "utf-8"

    @property
    def url(self) -> str:
        """Request target (raw path + query string)."""
        qs = self.query.raw
        if qs:
            return f"{self.raw_path}?{qs.decode('latin-1')}"
        return self.raw_path

    @property
    def body_consumed(self) -> bool:
        """True once any body read has started."""
        return self._state.get("consumed", False)

    # -- Async body access --

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks. Only one read per request."""
        if self._state.get("consumed"):
            raise BodyConsumedError
        self._state["consumed"] = True
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            if message.get("type") == "http.disconnect":
                break
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def body(self) -> bytes:
        """Read the full request body."""
        return b"".join([chunk async for chunk in self.stream()])

    async def text(self) -> str:
        """Read the body as text in the declared charset."""
        raw = await self.body()
        return raw.decode(self.charset)

    # -- Transformations --

    def with_cookies(self, cookies: CookieJar) -> TransportRequest:
        """Return a copy carrying *cookies*; body state is shared."""
        return replace(self, cookies=cookies)

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None) -> TransportRequest:
        """Create a TransportRequest from an ASGI scope and receive callable.

        Paths are taken relative to ``root_path`` when the server mounts the
        application below a prefix.
        """
        http_scope = HTTPScope.from_scope(scope)
        path = http_scope.path
        raw_path = http_scope.raw_path
        if raw_path is None:
            raw_path = quote(path, safe=_PATH_SAFE)

        root = http_scope.root_path
        if root and path.startswith(root):
            path = path[len(root) :]
            if raw_path.startswith(root):
                raw_path = raw_path[len(root) :]

        return cls(
            method=http_scope.method,
            path=path,
            raw_path=raw_path,
            headers=Headers(http_scope.headers),
            query=QueryParams(http_scope.query_string),
            http_version=http_scope.http_version,
            client=http_scope.client,
            _receive=receive,
        )
