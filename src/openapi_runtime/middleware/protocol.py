"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: TransportRequest, next: Next) -> TransportResponse: ...

No base class required. The pipeline checks the shape, not the lineage.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from openapi_runtime.http.request import TransportRequest
from openapi_runtime.http.response import TransportResponse

# The next handler in the middleware chain
type Next = Callable[[TransportRequest], Awaitable[TransportResponse]]


class Middleware(Protocol):
    """Protocol for pipeline middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(request: TransportRequest, next: Next) -> TransportResponse:
            start = time.monotonic()
            response = await next(request)
            elapsed = time.monotonic() - start
            return response.with_header("X-Time", f"{elapsed:.3f}")
    """

    async def __call__(self, request: TransportRequest, next: Next) -> TransportResponse: ...
