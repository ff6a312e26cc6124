from __future__ import annotations

import logging
import pydantic
import typing

from handlekit.exceptions import ErrorDetail, SchemaError, ValidationError

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = 'Value error, '


@typing.runtime_checkable
class Schema(typing.Protocol):  # pragma: nocover
    async def parse_async(self, value: typing.Any) -> typing.Any:
        ...


def _error_message(message: str) -> str:
    # pydantic prefixes messages of ValueError raised in custom validators
    if message.startswith(_VALUE_ERROR_PREFIX):
        return message[len(_VALUE_ERROR_PREFIX) :]
    return message


class PydanticSchema:
    """Validates input with pydantic.

    Accepts a model class or anything `pydantic.TypeAdapter` understands (`int`, `list[str]`, typed dicts,
    annotated types). Failures are re-raised as `handlekit.exceptions.ValidationError`.
    """

    def __init__(self, type_: typing.Any) -> None:
        self.type = type_
        try:
            self.adapter: pydantic.TypeAdapter[typing.Any] = pydantic.TypeAdapter(type_)
        except (pydantic.PydanticSchemaGenerationError, TypeError) as ex:
            raise SchemaError(f'Cannot build a validator for {type_!r}.') from ex

    def validate(self, value: typing.Any) -> typing.Any:
        try:
            return self.adapter.validate_python(value)
        except pydantic.ValidationError as ex:
            errors = [
                ErrorDetail(message=_error_message(error['msg']), loc=tuple(error['loc']), type=error['type'])
                for error in ex.errors()
            ]
            logger.debug('Input rejected by %r: %s', self, errors)
            raise ValidationError(errors) from ex

    async def parse_async(self, value: typing.Any) -> typing.Any:
        return self.validate(value)

    def __repr__(self) -> str:
        return '<PydanticSchema: %r>' % (self.type,)


def as_schema(obj: typing.Any) -> Schema | None:
    """Turn `obj` into a schema.

    Objects that already implement `parse_async` are returned unchanged, everything else is wrapped into
    `PydanticSchema`. `None` means "no schema"."""
    if obj is None:
        return None
    if not isinstance(obj, type) and isinstance(obj, Schema):
        return obj
    return PydanticSchema(obj)
