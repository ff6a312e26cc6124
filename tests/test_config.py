import pathlib

from handlekit.config import Config, Settings


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.log_errors
    assert not settings.always_run_middleware
    assert not settings.copy_context


def test_settings_replace() -> None:
    settings = Settings()
    changed = settings.replace(copy_context=True)
    assert changed.copy_context
    assert not settings.copy_context


def test_settings_from_environ() -> None:
    settings = Settings.from_environ(
        environ={
            "HANDLEKIT_LOG_ERRORS": "false",
            "HANDLEKIT_ALWAYS_RUN_MIDDLEWARE": "1",
        }
    )
    assert settings == Settings(log_errors=False, always_run_middleware=True, copy_context=False)


def test_settings_from_environ_with_prefix() -> None:
    settings = Settings.from_environ(environ={"APP_COPY_CONTEXT": "true"}, env_prefix="APP_")
    assert settings.copy_context


def test_settings_from_env_files(tmp_path: pathlib.Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("HANDLEKIT_COPY_CONTEXT=true\nHANDLEKIT_LOG_ERRORS=false\n")

    settings = Settings.from_environ(env_files=[env_file], environ={"HANDLEKIT_LOG_ERRORS": "true"})
    assert settings.copy_context
    assert settings.log_errors


def test_config_reads_multiple_env_files(tmp_path: pathlib.Path) -> None:
    first = tmp_path / ".env"
    first.write_text("A=1\nB=1\n")
    second = tmp_path / ".env.local"
    second.write_text("B=2\n")

    config = Config(env_files=[first, second, tmp_path / "missing.env"], environ={})
    assert config("A") == "1"
    assert config("B") == "2"
