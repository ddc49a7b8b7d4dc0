"""RequestView protocol — what operation handlers see of a request.

Parameter lookups return lists: an absent parameter is an empty list,
never ``None``. Body readers consume the request body, so a handler may
call at most one of them.
"""

from typing import Any, Protocol


class RequestView(Protocol):
    """Uniform, request-scoped accessor surface for operation handlers."""

    def path_parameter(self, name: str) -> list[str]: ...
    def query_parameter(self, name: str) -> list[str]: ...
    def header_parameter(self, name: str) -> list[str]: ...
    def cookie_parameter(self, name: str) -> list[str]: ...

    async def read_json_body(self) -> dict[str, Any]: ...
    async def read_url_encoded_body(self) -> dict[str, list[str]]: ...
    async def read_body_string(self) -> str: ...
