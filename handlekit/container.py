from __future__ import annotations

import typing

from handlekit.config import Settings
from handlekit.handlers import Handler
from handlekit.schemas import as_schema


class Container:
    """Binds a context and creates handlers that share it.

    The context is stored by reference. Every handler, middleware, and handler function created from this
    container sees the very same object, nothing guards it against concurrent mutation."""

    def __init__(
        self,
        context: typing.Mapping[str, typing.Any] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._context = context if context is not None else {}
        self.settings = settings or Settings()

    @property
    def context(self) -> typing.Mapping[str, typing.Any]:
        return self._context

    def create_handler(self, schema: typing.Any = None, settings: Settings | None = None) -> Handler:
        """Create a new handler with its own empty middleware list.

        `schema` can be a pydantic model, any type pydantic can validate, or an object with `parse_async` method."""
        return Handler(
            context=self._context,
            schema=as_schema(schema),
            middleware=[],
            settings=settings or self.settings,
        )

    def __repr__(self) -> str:
        return '<Container: context=%r>' % (self._context,)
