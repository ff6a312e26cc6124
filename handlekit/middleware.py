from __future__ import annotations

import dataclasses
import logging
import typing

from handlekit.utils import callable_name, run_async

logger = logging.getLogger(__name__)

_I = typing.TypeVar('_I')
_C = typing.TypeVar('_C', bound=typing.Mapping[str, typing.Any])


@dataclasses.dataclass(frozen=True, slots=True)
class Props(typing.Generic[_I, _C]):
    """What a middleware or a handler function receives."""

    input: _I
    context: _C


AnyProps = Props[typing.Any, typing.Any]
Middleware = typing.Callable[[AnyProps], typing.Union[AnyProps, typing.Awaitable[AnyProps]]]


def _returned_input(mw: Middleware, result: typing.Any) -> typing.Any:
    if isinstance(result, Props):
        return result.input
    if isinstance(result, typing.Mapping) and 'input' in result:
        return result['input']
    raise TypeError(
        f'Middleware {callable_name(mw)} must return Props or a mapping with "input" key, got {result!r}.'
    )


class MiddlewareStack:
    """Keeps track about all middleware used by a handler, in the order they were added."""

    def __init__(self, middleware: typing.Iterable[Middleware] | None = None) -> None:
        self._middleware: list[Middleware] = []
        for mw in middleware or []:
            self.use(mw)

    def use(self, mw: Middleware) -> None:
        """Add middleware to the end of stack."""
        if not callable(mw):
            raise TypeError(f'Middleware must be callable, got {mw!r}.')
        self._middleware.append(mw)

    async def run(self, input: typing.Any, context: typing.Mapping[str, typing.Any]) -> typing.Any:
        """Thread `input` through every middleware, one after another.

        Only the input part of what a middleware returns is passed on, every middleware gets the same context."""
        processed_input = input
        for mw in list(self._middleware):
            logger.debug('Calling middleware %s.', callable_name(mw))
            result = await run_async(mw, Props(input=processed_input, context=context))
            processed_input = _returned_input(mw, result)
        return processed_input

    def __iter__(self) -> typing.Iterator[Middleware]:
        return iter(self._middleware)

    def __len__(self) -> int:
        return len(self._middleware)
