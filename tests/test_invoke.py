"""Tests for openapi_runtime._internal.invoke — uniform sync/async calls."""

import threading

from openapi_runtime._internal.invoke import invoke


class TestInvoke:
    async def test_async_handler(self) -> None:
        async def handler(value: int) -> int:
            return value + 1

        assert await invoke(handler, 1) == 2

    async def test_sync_handler_runs_in_worker_thread(self) -> None:
        loop_thread = threading.get_ident()

        def handler() -> int:
            return threading.get_ident()

        assert await invoke(handler) != loop_thread

    async def test_sync_callable_returning_awaitable(self) -> None:
        async def inner() -> str:
            return "done"

        def handler() -> object:
            return inner()

        assert await invoke(handler) == "done"

    async def test_kwargs(self) -> None:
        def handler(*, name: str) -> str:
            return name

        assert await invoke(handler, name="x") == "x"
