"""Cookie-parser middleware.

Parses every ``Cookie`` header once and attaches the jar to the request
before it reaches the dispatcher.
"""

from openapi_runtime.http.cookies import build_cookie_jar
from openapi_runtime.http.request import TransportRequest
from openapi_runtime.http.response import TransportResponse
from openapi_runtime.middleware.protocol import Next


async def cookie_parser(request: TransportRequest, next: Next) -> TransportResponse:
    """Attach the parsed cookie jar to *request*."""
    jar = build_cookie_jar(request.headers.get_list("cookie"))
    return await next(request.with_cookies(jar))
