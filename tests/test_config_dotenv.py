from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_greeter import cli as cli_module
from lib_greeter import config as greeter_config
from lib_greeter.domain import GreeterConfig


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    greeter_config._reset_dotenv_state_for_testing()
    yield
    greeter_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values without overriding call arguments."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LIB_GREETER_NAME=dotenv-user\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LIB_GREETER_NAME", raising=False)

    loaded = greeter_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LIB_GREETER_NAME"] == "dotenv-user"

    os.environ.pop("LIB_GREETER_NAME", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LIB_GREETER_NAME=dotenv-user\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LIB_GREETER_NAME", "real-user")

    result = greeter_config.enable_dotenv()

    assert result is not None
    assert os.environ["LIB_GREETER_NAME"] == "real-user"


def test_enable_dotenv_runs_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / ".env").write_text("LIB_GREETER_GREETING=Hi\n")
    (second / ".env").write_text("LIB_GREETER_GREETING=Hey\n")
    monkeypatch.delenv("LIB_GREETER_GREETING", raising=False)

    assert greeter_config.enable_dotenv(search_from=first) == (first / ".env").resolve()
    assert greeter_config.enable_dotenv(search_from=second) == (first / ".env").resolve()
    assert os.environ["LIB_GREETER_GREETING"] == "Hi"

    os.environ.pop("LIB_GREETER_GREETING", None)


def test_enable_dotenv_defaults_to_cwd_lookup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without ``search_from`` the lookup is delegated to python-dotenv."""

    calls: list[dict[str, object]] = []

    def fake_find_dotenv(**kwargs: object) -> str:
        calls.append(kwargs)
        return ""

    monkeypatch.setattr(greeter_config, "find_dotenv", fake_find_dotenv)

    assert greeter_config.enable_dotenv() is None
    assert calls == [{"usecwd": True}]


def test_enable_dotenv_search_from_walks_upwards(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / ".env").write_text("LIB_GREETER_GREETING=Howdy\n")
    monkeypatch.delenv("LIB_GREETER_GREETING", raising=False)

    assert greeter_config.enable_dotenv(search_from=nested) == (tmp_path / ".env").resolve()
    assert os.environ["LIB_GREETER_GREETING"] == "Howdy"

    os.environ.pop("LIB_GREETER_GREETING", None)


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(greeter_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(greeter_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {greeter_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []

    result = runner.invoke(cli_module.cli, ["info"])
    assert result.exit_code == 0
    assert calls == []


def test_settings_default_when_environment_is_empty() -> None:
    settings = greeter_config.load_greeter_settings(environ={})

    assert settings.config == GreeterConfig()
    assert settings.buffer_size == greeter_config.DEFAULT_BUFFER_SIZE


def test_settings_read_environment() -> None:
    environ = {
        greeter_config.ENV_NAME: "Ada",
        greeter_config.ENV_GREETING: "Welcome",
        greeter_config.ENV_UPPERCASE: "yes",
        greeter_config.ENV_BUFFER_SIZE: "8",
    }

    settings = greeter_config.load_greeter_settings(environ=environ)

    assert settings.config == GreeterConfig(name="Ada", greeting="Welcome", uppercase=True)
    assert settings.buffer_size == 8


def test_explicit_values_win_over_environment() -> None:
    environ = {greeter_config.ENV_NAME: "Ada", greeter_config.ENV_UPPERCASE: "1"}

    settings = greeter_config.load_greeter_settings(name="Grace", uppercase=False, buffer_size=0, environ=environ)

    assert settings.config == GreeterConfig(name="Grace", uppercase=False)
    assert settings.buffer_size == 0


def test_explicit_empty_name_is_kept_for_validation() -> None:
    settings = greeter_config.load_greeter_settings(name="", environ={greeter_config.ENV_NAME: "Ada"})
    assert settings.config.name == ""


def test_empty_environment_name_counts_as_unset() -> None:
    settings = greeter_config.load_greeter_settings(environ={greeter_config.ENV_NAME: ""})
    assert settings.config.name is None


@pytest.mark.parametrize(
    "value, error_match",
    [
        ("lots", "must be an integer"),
        ("-3", "must not be negative"),
    ],
)
def test_invalid_buffer_size_environment(value: str, error_match: str) -> None:
    with pytest.raises(ValueError, match=error_match):
        greeter_config.load_greeter_settings(environ={greeter_config.ENV_BUFFER_SIZE: value})


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (None, None, False),
        (None, "on", True),
        (None, "0", False),
        (True, None, True),
        (False, "true", False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert greeter_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected
