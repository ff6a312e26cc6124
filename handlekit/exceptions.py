from __future__ import annotations

import dataclasses
import typing


class HandlekitError(Exception):
    """Base class for all handlekit errors."""


@dataclasses.dataclass(frozen=True, slots=True)
class ErrorDetail:
    """A single validation problem."""

    message: str
    loc: tuple[str | int, ...] = ()
    type: str = ''

    def __str__(self) -> str:
        if self.loc:
            return '{}: {}'.format('.'.join(str(part) for part in self.loc), self.message)
        return self.message


class ValidationError(HandlekitError):
    """Raised when input does not conform to a handler schema.

    The `errors` attribute keeps one `ErrorDetail` per failed field, in the order reported by the validator.
    """

    def __init__(self, errors: typing.Iterable[ErrorDetail]) -> None:
        self.errors = list(errors)
        super().__init__('; '.join(str(error) for error in self.errors) or 'Validation failed.')

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]


class SchemaError(HandlekitError, TypeError):
    """Raised when an object cannot be used as a schema."""
