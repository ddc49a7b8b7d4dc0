"""RouteConfig frozen dataclass and the handler contract."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from openapi_runtime.routing.method import OperationMethod
from openapi_runtime.routing.pattern import UriPattern

if TYPE_CHECKING:
    from openapi_runtime.http.response import OperationResult
    from openapi_runtime.http.view import RequestView

# Handlers may be ``def`` or ``async def``
type OperationHandler = Callable[
    ["RequestView"], "OperationResult | Awaitable[OperationResult]"
]


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """A registered binding of HTTP method, URI pattern and handler.

    Created while the router is built, never mutated afterwards.
    """

    method: OperationMethod
    pattern: UriPattern
    handler: OperationHandler
    operation_id: str | None = None

    def __str__(self) -> str:
        label = f" ({self.operation_id})" if self.operation_id else ""
        return f"{self.method} {self.pattern.template}{label}"
