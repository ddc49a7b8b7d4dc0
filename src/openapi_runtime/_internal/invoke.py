"""Invoke helpers — call sync or async handlers uniformly.

Operation handlers can be ``def`` or ``async def``. Any code that calls a
handler goes through ``invoke`` so the sync/async check lives in exactly
one place.

Usage::

    from openapi_runtime._internal.invoke import invoke

    result = await invoke(handler, view)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result.

    Coroutine functions are awaited on the event loop. Plain callables run
    in a worker thread via ``anyio.to_thread`` so a blocking handler does
    not stall other in-flight requests.
    """
    if inspect.iscoroutinefunction(handler):
        return await handler(*args, **kwargs)
    result = await anyio.to_thread.run_sync(functools.partial(handler, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result
