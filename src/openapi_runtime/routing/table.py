"""Route table and the router that builds it.

Routes are registered during setup, in order, and frozen into an
immutable ``RouteTable`` when the router is built. Registration order is
the tie-break between overlapping patterns.
"""

from collections.abc import Callable, Iterable, Iterator

from openapi_runtime.errors import ConfigurationError
from openapi_runtime.routing.method import OperationMethod
from openapi_runtime.routing.pattern import UriPattern
from openapi_runtime.routing.route import OperationHandler, RouteConfig


class RouteTable:
    """Immutable, ordered sequence of ``RouteConfig`` entries.

    Concurrent requests only read it, so no locking is involved.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[RouteConfig] = ()) -> None:
        self._routes = tuple(routes)

    def __iter__(self) -> Iterator[RouteConfig]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __getitem__(self, index: int) -> RouteConfig:
        return self._routes[index]

    def __repr__(self) -> str:
        return f"RouteTable({[str(r) for r in self._routes]!r})"

    @property
    def routes(self) -> tuple[RouteConfig, ...]:
        """All routes in registration order."""
        return self._routes


class Router:
    """Collects route registrations and builds a ``RouteTable``.

    Usage::

        router = Router()
        router.add_route("/widgets/{id}", "GET", get_widget)

        @router.route("/widgets", "POST")
        async def create_widget(request: RequestView) -> OperationResponse:
            ...

        table = router.build()

    Generated routers subclass ``Router`` and register their operations
    in ``configure()``, which ``build()`` calls once.
    """

    __slots__ = ("_built", "_routes")

    def __init__(self) -> None:
        self._routes: list[RouteConfig] = []
        self._built: RouteTable | None = None

    def configure(self) -> None:
        """Hook for subclasses to register routes. Called by ``build()``."""

    def add_route(
        self,
        path: str,
        method: OperationMethod | str,
        handler: OperationHandler,
        *,
        operation_id: str | None = None,
    ) -> RouteConfig:
        """Register a route. Must be called before ``build()``."""
        if self._built is not None:
            msg = "Cannot add routes after the router was built."
            raise ConfigurationError(msg)

        parsed = OperationMethod.parse(method) if isinstance(method, str) else method
        if parsed is None:
            msg = f"Unknown HTTP method {method!r} for route {path!r}."
            raise ConfigurationError(msg)

        config = RouteConfig(
            method=parsed,
            pattern=UriPattern(path),
            handler=handler,
            operation_id=operation_id,
        )
        self._routes.append(config)
        return config

    def route(
        self,
        path: str,
        method: OperationMethod | str = OperationMethod.GET,
        *,
        operation_id: str | None = None,
    ) -> Callable[[OperationHandler], OperationHandler]:
        """Decorator form of ``add_route``."""

        def decorator(func: OperationHandler) -> OperationHandler:
            self.add_route(
                path,
                method,
                func,
                operation_id=operation_id or getattr(func, "__name__", None),
            )
            return func

        return decorator

    def build(self) -> RouteTable:
        """Freeze the router. Returns the same table on repeated calls."""
        if self._built is None:
            self.configure()
            self._built = RouteTable(self._routes)
        return self._built
