"""Server configuration.

ServerConfig is a frozen dataclass with typed fields instead of string-key
dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(host="0.0.0.0", port=3000, access_log=False)
    """

    # Listener
    host: str = "localhost"
    port: int = 8080

    # Logging
    log_level: str = "info"  # forwarded to uvicorn
    access_log: bool = True  # one line per request via the access-log middleware
    uvicorn_access_log: bool = False  # uvicorn's own access log duplicates ours

    # Pipeline
    parse_cookies: bool = True
