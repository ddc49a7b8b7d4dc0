"""Cookie header parsing.

The cookie-parser middleware runs this once per request and attaches the
resulting jar to the request; handlers read it through the request view.
"""

from collections.abc import Iterable
from types import MappingProxyType

type CookieJar = MappingProxyType[str, str]

EMPTY_JAR: CookieJar = MappingProxyType({})


def parse_cookies(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty or missing headers. When a name repeats,
    the first occurrence wins. Double-quoted values are unquoted.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        pair = pair.strip()
        if "=" in pair:
            key, _, value = pair.partition("=")
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            cookies.setdefault(key.strip(), value)
    return cookies


def build_cookie_jar(headers: Iterable[str]) -> CookieJar:
    """Merge every ``Cookie`` header of a request into one read-only jar."""
    jar: dict[str, str] = {}
    for header in headers:
        for name, value in parse_cookies(header).items():
            jar.setdefault(name, value)
    return MappingProxyType(jar)
