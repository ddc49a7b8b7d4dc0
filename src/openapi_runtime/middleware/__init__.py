"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: TransportRequest, next: Next) -> TransportResponse

Built-in middleware:
    AccessLog -- One log line per request
    cookie_parser -- Attach the parsed Cookie jar to the request
"""

from openapi_runtime.middleware.access_log import AccessLog
from openapi_runtime.middleware.cookies import cookie_parser
from openapi_runtime.middleware.protocol import Middleware, Next

__all__ = [
    "AccessLog",
    "Middleware",
    "Next",
    "cookie_parser",
]
