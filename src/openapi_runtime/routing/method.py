"""HTTP operation methods."""

from enum import StrEnum


class OperationMethod(StrEnum):
    """HTTP verbs an OpenAPI operation can be bound to."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, raw: str) -> "OperationMethod | None":
        """Return the method for *raw*, or ``None`` if it is not a known verb.

        Unknown verbs fail closed: the dispatcher treats them as unroutable.
        """
        try:
            return cls(raw.upper())
        except ValueError:
            return None
