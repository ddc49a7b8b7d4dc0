"""Tests for openapi_runtime.routing.table — Router builder and RouteTable."""

import pytest

from openapi_runtime.errors import ConfigurationError
from openapi_runtime.http.response import OperationResponse
from openapi_runtime.routing.method import OperationMethod
from openapi_runtime.routing.pattern import UriPattern
from openapi_runtime.routing.route import RouteConfig
from openapi_runtime.routing.table import RouteTable, Router


def _handler(request: object) -> OperationResponse:
    return OperationResponse.empty()


class TestRouter:
    def test_add_route_preserves_order(self) -> None:
        router = Router()
        router.add_route("/b", "GET", _handler)
        router.add_route("/a", "POST", _handler)
        table = router.build()

        assert [r.pattern.template for r in table] == ["/b", "/a"]
        assert [r.method for r in table] == [OperationMethod.GET, OperationMethod.POST]

    def test_add_route_returns_config(self) -> None:
        router = Router()
        config = router.add_route("/a/{id}", OperationMethod.DELETE, _handler, operation_id="del")
        assert config == RouteConfig(
            method=OperationMethod.DELETE,
            pattern=UriPattern("/a/{id}"),
            handler=_handler,
            operation_id="del",
        )

    def test_lowercase_method_string(self) -> None:
        router = Router()
        config = router.add_route("/a", "put", _handler)
        assert config.method is OperationMethod.PUT

    def test_unknown_method_rejected(self) -> None:
        router = Router()
        with pytest.raises(ConfigurationError, match="Unknown HTTP method"):
            router.add_route("/a", "BREW", _handler)

    def test_invalid_pattern_rejected(self) -> None:
        router = Router()
        with pytest.raises(ConfigurationError):
            router.add_route("/a/{", "GET", _handler)

    def test_decorator_registers_and_returns_function(self) -> None:
        router = Router()

        @router.route("/widgets", "POST")
        def create_widget(request: object) -> OperationResponse:
            return OperationResponse.empty(201)

        (route,) = router.build()
        assert route.handler is create_widget
        assert route.operation_id == "create_widget"
        assert route.method is OperationMethod.POST

    def test_decorator_defaults_to_get(self) -> None:
        router = Router()
        router.route("/x")(_handler)
        assert router.build()[0].method is OperationMethod.GET

    def test_no_routes_after_build(self) -> None:
        router = Router()
        router.build()
        with pytest.raises(ConfigurationError, match="after the router was built"):
            router.add_route("/late", "GET", _handler)

    def test_build_is_idempotent(self) -> None:
        router = Router()
        router.add_route("/a", "GET", _handler)
        assert router.build() is router.build()

    def test_configure_hook(self) -> None:
        class WidgetRouter(Router):
            def configure(self) -> None:
                self.add_route("/widgets/{id}", "GET", _handler, operation_id="getWidget")

        table = WidgetRouter().build()
        assert len(table) == 1
        assert str(table[0]) == "GET /widgets/{id} (getWidget)"


class TestRouteTable:
    def test_is_read_only_sequence(self) -> None:
        route = RouteConfig(OperationMethod.GET, UriPattern("/a"), _handler)
        table = RouteTable([route])

        assert list(table) == [route]
        assert table.routes == (route,)
        assert not hasattr(table, "append")

    def test_route_config_is_frozen(self) -> None:
        route = RouteConfig(OperationMethod.GET, UriPattern("/a"), _handler)
        with pytest.raises(AttributeError):
            route.method = OperationMethod.POST  # type: ignore[misc]

    def test_empty(self) -> None:
        assert len(RouteTable()) == 0
