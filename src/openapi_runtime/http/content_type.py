"""Parsed media types.

``ContentType`` decides which response body kinds a content type can carry:
JSON bodies need a JSON type, string bodies need a text-like type, binary
bodies accept anything.
"""

from dataclasses import dataclass, field
from typing import ClassVar

# application/* subtypes that are textual even though the primary type isn't text
_TEXTUAL_APPLICATION_SUBTYPES = frozenset(
    {"json", "xml", "javascript", "x-www-form-urlencoded", "yaml", "x-yaml"}
)


@dataclass(frozen=True, slots=True)
class ContentType:
    """An immutable media type such as ``application/json; charset=utf-8``.

    ``primary_type`` and ``subtype`` are lower-cased; parameter names are
    lower-cased, parameter values are kept as given.
    """

    primary_type: str
    subtype: str
    parameters: tuple[tuple[str, str], ...] = field(default=())

    JSON: ClassVar["ContentType"]
    TEXT_PLAIN: ClassVar["ContentType"]
    OCTET_STREAM: ClassVar["ContentType"]

    @classmethod
    def parse(cls, value: str) -> "ContentType":
        """Parse a ``Content-Type`` header value.

        Raises ``ValueError`` if *value* has no ``type/subtype`` part.
        """
        mime, *params = value.split(";")
        primary, sep, subtype = mime.strip().partition("/")
        if not sep or not primary or not subtype:
            msg = f"Invalid content type {value!r}"
            raise ValueError(msg)
        parsed: list[tuple[str, str]] = []
        for param in params:
            name, _, raw = param.partition("=")
            name = name.strip().lower()
            if name:
                parsed.append((name, raw.strip().strip('"')))
        return cls(primary.lower(), subtype.lower(), tuple(parsed))

    @property
    def mime_type(self) -> str:
        """The ``type/subtype`` part without parameters."""
        return f"{self.primary_type}/{self.subtype}"

    @property
    def charset(self) -> str | None:
        """The ``charset`` parameter, if present."""
        for name, value in self.parameters:
            if name == "charset":
                return value
        return None

    @property
    def is_json(self) -> bool:
        """True for ``application/json`` and ``+json`` structured suffixes."""
        return self.subtype == "json" or self.subtype.endswith("+json")

    @property
    def is_string(self) -> bool:
        """True for content types whose body is text."""
        if self.primary_type == "text" or self.is_json:
            return True
        if self.primary_type != "application":
            return False
        return self.subtype in _TEXTUAL_APPLICATION_SUBTYPES or self.subtype.endswith("+xml")

    def with_charset(self, charset: str) -> "ContentType":
        """Return a copy with the ``charset`` parameter replaced."""
        params = tuple(p for p in self.parameters if p[0] != "charset")
        return ContentType(self.primary_type, self.subtype, (*params, ("charset", charset)))

    def __str__(self) -> str:
        rendered = "".join(f"; {name}={value}" for name, value in self.parameters)
        return f"{self.mime_type}{rendered}"


ContentType.JSON = ContentType("application", "json")
ContentType.TEXT_PLAIN = ContentType("text", "plain", (("charset", "utf-8"),))
ContentType.OCTET_STREAM = ContentType("application", "octet-stream")
