"""Adapter from a transport request and a route match to a RequestView.

``AsgiRequestView`` implements the ``RequestView`` protocol on top of a
``TransportRequest``. Path parameters are percent-decoded once, here,
because the matcher works on the raw path.
"""

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, unquote

from openapi_runtime.errors import BodyFormatError
from openapi_runtime.http.request import TransportRequest
from openapi_runtime.routing.pattern import MatchResult


def _wrap(value: str | None) -> list[str]:
    if value is None:
        return []
    return [value]


class AsgiRequestView:
    """The ``RequestView`` handed to operation handlers.

    The cookie jar is passed explicitly; it comes from the cookie-parser
    middleware and is empty when that middleware is disabled.
    """

    __slots__ = ("_cookies", "_match", "_path_params", "_request")

    def __init__(
        self,
        request: TransportRequest,
        match: MatchResult,
        cookies: Mapping[str, str] | None = None,
    ) -> None:
        self._request = request
        self._match = match
        self._cookies = request.cookies if cookies is None else cookies
        self._path_params = {key: unquote(value) for key, value in match.parameters.items()}

    @property
    def request(self) -> TransportRequest:
        """The underlying transport request."""
        return self._request

    @property
    def match(self) -> MatchResult:
        """The route match this view was built from."""
        return self._match

    # -- Parameters --

    def path_parameter(self, name: str) -> list[str]:
        return _wrap(self._path_params.get(name))

    def query_parameter(self, name: str) -> list[str]:
        return self._request.query.get_list(name)

    def header_parameter(self, name: str) -> list[str]:
        # First occurrence only; repeated headers are not aggregated
        return _wrap(self._request.headers.get(name))

    def cookie_parameter(self, name: str) -> list[str]:
        return _wrap(self._cookies.get(name))

    # -- Body readers (each consumes the body) --

    async def read_json_body(self) -> dict[str, Any]:
        """Parse the body as a JSON object.

        Raises ``json.JSONDecodeError`` for malformed JSON and
        ``BodyFormatError`` when the root value is not an object.
        """
        value = json.loads(await self._request.text())
        if not isinstance(value, dict):
            msg = f"Expected a JSON object body, got {type(value).__name__}."
            raise BodyFormatError(msg)
        return value

    async def read_url_encoded_body(self) -> dict[str, list[str]]:
        """Parse a URL-encoded body, one value per key.

        A repeated key keeps its last value. Use
        ``read_url_encoded_body_all`` to keep every value.
        """
        pairs = parse_qsl(await self._request.text(), keep_blank_values=True)
        return {key: [value] for key, value in pairs if key}

    async def read_url_encoded_body_all(self) -> dict[str, list[str]]:
        """Parse a URL-encoded body, keeping every value in order."""
        result: dict[str, list[str]] = {}
        for key, value in parse_qsl(await self._request.text(), keep_blank_values=True):
            if key:
                result.setdefault(key, []).append(value)
        return result

    async def read_body_string(self) -> str:
        return await self._request.text()
