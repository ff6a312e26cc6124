from __future__ import annotations

import dataclasses
import enum
import typing

T = typing.TypeVar('T')


class Stage(enum.StrEnum):
    VALIDATION = 'validation'
    MIDDLEWARE = 'middleware'
    HANDLER = 'handler'


@dataclasses.dataclass(frozen=True, slots=True)
class Result(typing.Generic[T]):
    """Outcome of a single endpoint call.

    Successful results carry the handler return value in `data`. Failed ones carry the raised exception,
    unchanged, in `error` and the pipeline step it came from in `stage`.
    """

    ok: bool
    data: T | None = None
    error: BaseException | None = None
    stage: Stage | None = None

    def __post_init__(self) -> None:
        if self.ok and (self.error is not None or self.stage is not None):
            raise ValueError('Successful result cannot carry an error.')
        if not self.ok and (self.error is None or self.data is not None):
            raise ValueError('Failed result must carry an error and no data.')

    @classmethod
    def success(cls, data: T) -> Result[T]:
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: BaseException, stage: Stage | None = None) -> Result[T]:
        return cls(ok=False, error=error, stage=stage)

    def unwrap(self) -> T:
        """Return data or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return typing.cast(T, self.data)

    def as_dict(self) -> dict[str, typing.Any]:
        return {'ok': self.ok, 'data': self.data, 'error': self.error}

    def __bool__(self) -> bool:
        return self.ok
