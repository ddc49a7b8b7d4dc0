"""openapi_runtime — request-dispatch core for generated OpenAPI servers.

Routes requests to operation handlers and encodes their typed responses,
served over ASGI.

Basic usage::

    from openapi_runtime import OpenApiServer, OperationResponse, Router

    router = Router()

    @router.route("/widgets/{id}", "GET")
    async def get_widget(request):
        (widget_id,) = request.path_parameter("id")
        return OperationResponse.json({"id": widget_id})

    OpenApiServer(router).run(port=8080)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ContentType",
    "DiagnosticSink",
    "Dispatcher",
    "OpenApiError",
    "OpenApiServer",
    "OperationFailure",
    "OperationMethod",
    "OperationResponse",
    "RequestView",
    "ResponseError",
    "RouteConfig",
    "RouteTable",
    "Router",
    "ServerConfig",
    "StoppableProcess",
    "UriPattern",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import openapi_runtime`` fast while providing a clean top-level API.
    """
    if name == "OpenApiServer":
        from openapi_runtime.server.app import OpenApiServer

        return OpenApiServer

    if name == "StoppableProcess":
        from openapi_runtime.server.lifecycle import StoppableProcess

        return StoppableProcess

    if name == "Dispatcher":
        from openapi_runtime.server.dispatcher import Dispatcher

        return Dispatcher

    if name == "ServerConfig":
        from openapi_runtime.config import ServerConfig

        return ServerConfig

    if name == "DiagnosticSink":
        from openapi_runtime.diagnostics import DiagnosticSink

        return DiagnosticSink

    if name == "ContentType":
        from openapi_runtime.http.content_type import ContentType

        return ContentType

    if name in ("OperationResponse", "OperationFailure"):
        from openapi_runtime.http import response as _resp

        return getattr(_resp, name)

    if name == "RequestView":
        from openapi_runtime.http.view import RequestView

        return RequestView

    if name in ("RouteTable", "Router"):
        from openapi_runtime.routing import table as _table

        return getattr(_table, name)

    if name == "RouteConfig":
        from openapi_runtime.routing.route import RouteConfig

        return RouteConfig

    if name == "OperationMethod":
        from openapi_runtime.routing.method import OperationMethod

        return OperationMethod

    if name == "UriPattern":
        from openapi_runtime.routing.pattern import UriPattern

        return UriPattern

    if name in ("ConfigurationError", "OpenApiError", "ResponseError"):
        from openapi_runtime import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
