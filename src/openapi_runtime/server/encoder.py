"""Response encoder — OperationResponse to TransportResponse.

Matches the body union exhaustively. Declared headers are flattened to
their first value and the declared content type always wins over any
``Content-Type`` the handler put in its headers.
"""

import json
from typing import assert_never

from openapi_runtime.errors import ResponseContractError
from openapi_runtime.http.response import (
    BinaryBody,
    JsonBody,
    OperationResponse,
    StringBody,
    TransportResponse,
)


def _check_latin1(name: str, value: str) -> None:
    # ASGI header bytes are latin-1
    try:
        name.encode("latin-1")
        value.encode("latin-1")
    except UnicodeEncodeError as exc:
        msg = f"Header {name!r} is not representable in latin-1: {value!r}."
        raise ResponseContractError(msg) from exc


def _merge_headers(response: OperationResponse) -> tuple[tuple[str, str], ...]:
    merged = [
        (name, values[0])
        for name, values in response.headers.items()
        if values and name.lower() != "content-type"
    ]
    assert response.content_type is not None
    merged.append(("Content-Type", str(response.content_type)))
    for name, value in merged:
        _check_latin1(name, value)
    return tuple(merged)


def _encode_json(value: object) -> bytes:
    try:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        msg = f"JSON body is not serializable: {exc}"
        raise ResponseContractError(msg) from exc
    return text.encode("utf-8")


def encode_response(response: OperationResponse) -> TransportResponse:
    """Encode a handler response into status, headers and body bytes.

    Raises ``ResponseContractError`` for a JSON body holding NaN or
    infinity, and for headers that cannot be sent as latin-1.
    """
    match response.body:
        case None:
            return TransportResponse(status=response.status)
        case JsonBody(value=value):
            assert response.content_type is not None and response.content_type.is_json
            body = _encode_json(value)
        case StringBody(text=text):
            assert response.content_type is not None and response.content_type.is_string
            body = text.encode(response.content_type.charset or "utf-8")
        case BinaryBody(data=data):
            body = data
        case _:
            assert_never(response.body)

    return TransportResponse(
        status=response.status,
        headers=_merge_headers(response),
        body=body,
    )
