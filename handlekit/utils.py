from __future__ import annotations

import functools
import inspect
import typing


def is_async_callable(fn: typing.Any) -> bool:
    while isinstance(fn, functools.partial):
        fn = fn.func
    return inspect.iscoroutinefunction(fn) or (callable(fn) and inspect.iscoroutinefunction(getattr(fn, '__call__', None)))


async def run_async(fn: typing.Callable, *args: typing.Any, **kwargs: typing.Any) -> typing.Any:
    """
    Awaits a function.

    Sync callables are called in place, on the event loop thread. Awaitables they return are awaited too.
    """
    if is_async_callable(fn):
        return await fn(*args, **kwargs)

    result = fn(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result


def callable_name(fn: typing.Any) -> str:
    while isinstance(fn, functools.partial):
        fn = fn.func
    name = getattr(fn, '__qualname__', None) or type(fn).__qualname__
    module_name = getattr(fn, '__module__', '') or type(fn).__module__
    return f'{module_name}.{name}'
