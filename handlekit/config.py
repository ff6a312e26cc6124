from __future__ import annotations

import dataclasses
import os
import pathlib
import typing
from starlette.config import Config as BaseConfig
from starlette.config import Environ

__all__ = ["Config", "Settings"]


class Config(BaseConfig):
    """Environment reader that merges several env files, later files win."""

    def __init__(
        self,
        env_files: typing.Iterable[str | pathlib.Path] | None = None,
        env_prefix: str = "",
        environ: typing.Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(None, environ if environ is not None else Environ(), env_prefix)
        for env_file in env_files or []:
            if os.path.exists(env_file) and os.path.isfile(env_file):
                self.file_values.update(BaseConfig(env_file=env_file).file_values)


@dataclasses.dataclass(frozen=True)
class Settings:
    """Handler behaviour switches.

    :param log_errors: log every error captured by an endpoint
    :param always_run_middleware: run middleware for handlers without a schema (on an empty input)
    :param copy_context: give each endpoint call a shallow copy of the context instead of the shared object
    """

    log_errors: bool = True
    always_run_middleware: bool = False
    copy_context: bool = False

    def replace(self, **changes: typing.Any) -> Settings:
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_environ(
        cls,
        env_files: typing.Iterable[str | pathlib.Path] | None = None,
        environ: typing.Mapping[str, str] | None = None,
        env_prefix: str = "HANDLEKIT_",
    ) -> Settings:
        config = Config(env_files=env_files, env_prefix=env_prefix, environ=environ)
        return cls(
            log_errors=config("LOG_ERRORS", cast=bool, default=cls.log_errors),
            always_run_middleware=config("ALWAYS_RUN_MIDDLEWARE", cast=bool, default=cls.always_run_middleware),
            copy_context=config("COPY_CONTEXT", cast=bool, default=cls.copy_context),
        )
