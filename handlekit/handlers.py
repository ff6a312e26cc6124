from __future__ import annotations

import logging
import typing

from handlekit.config import Settings
from handlekit.middleware import Middleware, MiddlewareStack, Props
from handlekit.results import Result, Stage
from handlekit.schemas import Schema
from handlekit.utils import callable_name, run_async

logger = logging.getLogger(__name__)

_O = typing.TypeVar('_O')
HandlerFunction = typing.Callable[[Props[typing.Any, typing.Any]], typing.Union[_O, typing.Awaitable[_O]]]


class Endpoint(typing.Generic[_O]):
    """An async callable produced by `Handler.execute`.

    Calling it validates the input, runs the middleware chain and the handler function, and always returns a
    `Result`. It never raises for errors coming from those steps."""

    def __init__(self, handler: Handler, fn: HandlerFunction[_O]) -> None:
        self.handler = handler
        self.fn = fn

    async def __call__(self, input: typing.Any = None) -> Result[_O]:
        handler = self.handler
        settings = handler.settings
        context = dict(handler.context) if settings.copy_context else handler.context
        processed_input: typing.Any = {}
        stage = Stage.VALIDATION
        try:
            if handler.schema is not None:
                processed_input = await handler.schema.parse_async(input)
                stage = Stage.MIDDLEWARE
                processed_input = await handler.middleware.run(processed_input, context)
            elif settings.always_run_middleware:
                stage = Stage.MIDDLEWARE
                processed_input = await handler.middleware.run(processed_input, context)

            stage = Stage.HANDLER
            data = await run_async(self.fn, Props(input=processed_input, context=context))
        except Exception as ex:
            if settings.log_errors:
                logger.exception('Endpoint %s failed at %s stage.', callable_name(self.fn), stage)
            return Result.failure(ex, stage)
        return Result.success(data)

    def __repr__(self) -> str:
        return '<Endpoint: %s>' % callable_name(self.fn)


class Handler:
    """Holds a schema, a shared context, and an ordered middleware list.

    Middleware runs only when the handler has a schema, unless `Settings.always_run_middleware` is set.
    Endpoints read the middleware list when called, so middleware added after `execute` applies to them too."""

    def __init__(
        self,
        context: typing.Mapping[str, typing.Any],
        schema: Schema | None = None,
        middleware: typing.Iterable[Middleware] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._context = context
        self._schema = schema
        self._middleware = MiddlewareStack(middleware)
        self.settings = settings or Settings()

    @property
    def context(self) -> typing.Mapping[str, typing.Any]:
        return self._context

    @property
    def schema(self) -> Schema | None:
        return self._schema

    @property
    def middleware(self) -> MiddlewareStack:
        return self._middleware

    def use(self, middleware: Middleware) -> Handler:
        """Append a middleware. Returns the handler itself so calls can be chained."""
        self._middleware.use(middleware)
        return self

    def execute(self, fn: HandlerFunction[_O]) -> Endpoint[_O]:
        return Endpoint(self, fn)

    def __repr__(self) -> str:
        return '<Handler: schema=%r, middleware=%s>' % (self._schema, len(self._middleware))
