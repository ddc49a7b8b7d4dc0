"""URI patterns with named path segments.

A pattern like ``/users/{id}/posts/{post_id}`` is compiled once into a
regex. Matching is anchored at the start only: whatever trails the pattern
is reported as the match remainder, and callers decide whether a prefix
match is acceptable.
"""

import re
from dataclasses import dataclass, field

from openapi_runtime.errors import ConfigurationError

# One path segment: anything but "/", "?" and "#", at least one character
_SEGMENT = r"([^/?#]+)"


@dataclass(frozen=True, slots=True)
class PatternPart:
    """A parsed piece of a URI pattern.

    Literal:  ``/users/``  (is_param=False)
    Param:    ``{id}``     (is_param=True, value="id")
    """

    value: str
    is_param: bool = False


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of matching a concrete path against a ``UriPattern``.

    ``parameters`` holds raw (still percent-encoded) captures.
    ``remainder`` is the unmatched tail of the path.
    """

    parameters: dict[str, str] = field(default_factory=dict)
    remainder: str = ""

    @property
    def is_full(self) -> bool:
        """True when the whole path was consumed by the pattern."""
        return not self.remainder


def parse_pattern(template: str) -> list[PatternPart]:
    """Split a URI template into literal and parameter parts.

    Examples::

        "/users"          -> [PatternPart("/users")]
        "/users/{id}"     -> [PatternPart("/users/"), PatternPart("id", is_param=True)]

    Raises ``ConfigurationError`` for unbalanced braces, empty names or a
    name used twice.
    """
    parts: list[PatternPart] = []
    seen: set[str] = set()
    pos = 0
    while pos < len(template):
        start = template.find("{", pos)
        stray = template.find("}", pos)
        if stray != -1 and (start == -1 or stray < start):
            msg = f"Unbalanced '}}' in URI pattern {template!r}."
            raise ConfigurationError(msg)
        if start == -1:
            parts.append(PatternPart(template[pos:]))
            break
        if start > pos:
            parts.append(PatternPart(template[pos:start]))
        end = template.find("}", start)
        if end == -1:
            msg = f"Unbalanced '{{' in URI pattern {template!r}."
            raise ConfigurationError(msg)
        name = template[start + 1 : end].strip()
        if not name or "{" in name:
            msg = f"Invalid parameter {template[start : end + 1]!r} in URI pattern {template!r}."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Parameter {name!r} appears more than once in URI pattern {template!r}."
            raise ConfigurationError(msg)
        seen.add(name)
        parts.append(PatternPart(name, is_param=True))
        pos = end + 1
    return parts


class UriPattern:
    """A compiled URI template.

    Usage::

        pattern = UriPattern("/users/{id}")
        match = pattern.match("/users/42")
        match.parameters  # {"id": "42"}
        match.is_full     # True
    """

    __slots__ = ("_names", "_regex", "template")

    def __init__(self, template: str) -> None:
        self.template = template
        parts = parse_pattern(template)
        self._names = tuple(p.value for p in parts if p.is_param)
        source = "".join(_SEGMENT if p.is_param else re.escape(p.value) for p in parts)
        self._regex = re.compile(source)

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Names of the captured segments, in pattern order."""
        return self._names

    def match(self, url: str) -> MatchResult | None:
        """Match *url* from its start. Returns ``None`` if the prefix differs."""
        m = self._regex.match(url)
        if m is None:
            return None
        return MatchResult(
            parameters=dict(zip(self._names, m.groups(), strict=True)),
            remainder=url[m.end() :],
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriPattern):
            return NotImplemented
        return self.template == other.template

    def __hash__(self) -> int:
        return hash(self.template)

    def __repr__(self) -> str:
        return f"UriPattern({self.template!r})"
