"""openapi_runtime exception hierarchy.

Shared across the router, adapter, encoder and server pipeline so every
module raises and catches the same types.
"""


class OpenApiError(Exception):
    """Base for all openapi_runtime errors."""


class ConfigurationError(OpenApiError):
    """Raised when the route configuration is invalid.

    Typically raised while compiling URI patterns or building the router,
    i.e. before the server starts accepting requests.
    """


class ResponseError(OpenApiError):
    """An HTTP-meaningful failure raised by an operation handler.

    The server pipeline catches it and answers with ``status`` and
    ``message`` as the plain-text body. Handlers that prefer not to raise
    can return an ``OperationFailure`` instead.
    """

    def __init__(self, status: int, message: str = "") -> None:
        super().__init__(status, message)
        self.status = status
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return f"{self.status}: {self.message}"
        return str(self.status)


class BodyFormatError(OpenApiError, ValueError):
    """The request body parsed, but not into the expected shape."""


class BodyConsumedError(OpenApiError, RuntimeError):
    """The request body stream was already read once."""

    def __init__(self, detail: str = "Request body was already consumed.") -> None:
        super().__init__(detail)


class ResponseContractError(OpenApiError, TypeError):
    """An ``OperationResponse`` pairs a body with an incompatible content type.

    This is a programming error in the handler and is never converted into
    an HTTP response.
    """
