"""ASGI callable types and the slice of an ``http`` scope a request needs."""

from collections.abc import Awaitable, Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

type Scope = MutableMapping[str, Any]
type Message = MutableMapping[str, Any]
type Receive = Callable[[], Awaitable[Message]]
type Send = Callable[[Message], Awaitable[None]]
type ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class HTTPScope:
    """Fields read from an ASGI ``http`` scope.

    ``raw_path`` is decoded as latin-1 with any query string removed, or
    ``None`` when the server did not supply one.
    """

    method: str
    path: str
    raw_path: str | None
    query_string: bytes
    root_path: str
    headers: tuple[tuple[bytes, bytes], ...]
    http_version: str
    client: tuple[str, int] | None

    @classmethod
    def from_scope(cls, scope: Scope) -> "HTTPScope":
        raw = scope.get("raw_path")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            # Some servers include the query string in raw_path
            raw_path=raw.decode("latin-1").split("?", 1)[0] if raw else None,
            query_string=scope.get("query_string", b""),
            root_path=scope.get("root_path", ""),
            headers=tuple(scope.get("headers", ())),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
