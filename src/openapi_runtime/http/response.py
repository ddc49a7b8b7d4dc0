"""Operation responses and the transport response they encode to.

``OperationResponse`` is what a handler returns. Its body is one of
``JsonBody``, ``StringBody``, ``BinaryBody`` or ``None``, and the
pairing of body kind and content type is checked at construction.
``TransportResponse`` is the status/headers/bytes triple sent over ASGI.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from openapi_runtime.errors import ResponseContractError
from openapi_runtime.http.content_type import ContentType

type HeaderMultimap = Mapping[str, Sequence[str]]


@dataclass(frozen=True, slots=True)
class JsonBody:
    """A structured value serialized as JSON."""

    value: Any


@dataclass(frozen=True, slots=True)
class StringBody:
    """Text encoded with the response content type's charset."""

    text: str


@dataclass(frozen=True, slots=True)
class BinaryBody:
    """Raw bytes, sent unchanged."""

    data: bytes


type ResponseBody = JsonBody | StringBody | BinaryBody | None


@dataclass(frozen=True, slots=True)
class OperationResponse:
    """A typed handler response.

    Build with the factory helpers and chain ``.with_header()``::

        OperationResponse.json({"id": 7}, status=201).with_header("Location", "/widgets/7")
        OperationResponse.text("pong")
        OperationResponse.binary(png_bytes, ContentType.parse("image/png"))
        OperationResponse.empty(204)

    Raises ``ResponseContractError`` if the body kind and content type
    don't fit together.
    """

    status: int = 200
    headers: HeaderMultimap = field(default_factory=lambda: MappingProxyType({}))
    content_type: ContentType | None = None
    body: ResponseBody = None

    def __post_init__(self) -> None:
        match self.body:
            case None:
                return
            case JsonBody():
                if self.content_type is None or not self.content_type.is_json:
                    msg = f"JSON body requires a JSON content type, got {self.content_type}."
                    raise ResponseContractError(msg)
            case StringBody():
                if self.content_type is None or not self.content_type.is_string:
                    msg = f"String body requires a text content type, got {self.content_type}."
                    raise ResponseContractError(msg)
            case BinaryBody():
                if self.content_type is None:
                    msg = "Binary body requires a content type."
                    raise ResponseContractError(msg)
            case _:
                msg = f"Unsupported response body {self.body!r}."
                raise ResponseContractError(msg)

    # -- Factories --

    @classmethod
    def json(
        cls,
        value: Any,
        *,
        status: int = 200,
        headers: HeaderMultimap | None = None,
        content_type: ContentType = ContentType.JSON,
    ) -> "OperationResponse":
        """A JSON response."""
        return cls(status, _freeze(headers), content_type, JsonBody(value))

    @classmethod
    def text(
        cls,
        text: str,
        *,
        status: int = 200,
        headers: HeaderMultimap | None = None,
        content_type: ContentType = ContentType.TEXT_PLAIN,
    ) -> "OperationResponse":
        """A text response."""
        return cls(status, _freeze(headers), content_type, StringBody(text))

    @classmethod
    def binary(
        cls,
        data: bytes,
        content_type: ContentType = ContentType.OCTET_STREAM,
        *,
        status: int = 200,
        headers: HeaderMultimap | None = None,
    ) -> "OperationResponse":
        """A binary response."""
        return cls(status, _freeze(headers), content_type, BinaryBody(data))

    @classmethod
    def empty(cls, status: int = 204) -> "OperationResponse":
        """A status-only response."""
        return cls(status)

    # -- Chainable transformations --

    def with_status(self, status: int) -> "OperationResponse":
        """Return a new response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, *values: str) -> "OperationResponse":
        """Return a new response with *values* appended to header *name*."""
        merged = {key: list(existing) for key, existing in self.headers.items()}
        merged.setdefault(name, []).extend(values)
        return replace(self, headers=_freeze(merged))


@dataclass(frozen=True, slots=True)
class OperationFailure:
    """A declared HTTP failure returned by a handler instead of raised.

    Sent as a plain-text response with ``status`` and ``message``.
    """

    status: int
    message: str = ""


type OperationResult = OperationResponse | OperationFailure


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Status, flattened headers and optional body bytes for the wire."""

    status: int
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    @classmethod
    def plain_text(cls, status: int, text: str) -> "TransportResponse":
        """A ``text/plain`` response, used for 404s and declared failures."""
        return cls(
            status=status,
            headers=(("Content-Type", str(ContentType.TEXT_PLAIN)),),
            body=text.encode("utf-8"),
        )

    def header(self, name: str) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None

    def with_header(self, name: str, value: str) -> "TransportResponse":
        """Return a new response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))


def _freeze(headers: HeaderMultimap | None) -> HeaderMultimap:
    if not headers:
        return MappingProxyType({})
    return MappingProxyType({name: tuple(values) for name, values in headers.items()})
