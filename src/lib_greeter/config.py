"""Environment and ``.env`` configuration for the greeter CLI.

Purpose
-------
Resolve the greeter configuration the CLI should use from three layers:
explicit command-line values, ``LIB_GREETER_*`` environment variables
(optionally seeded from the nearest ``.env`` file) and the library defaults.

Contents
--------
* Dotenv toggling: :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`,
  :func:`enable_dotenv`.
* Settings: :class:`GreeterSettings`, :func:`load_greeter_settings`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain import GreeterConfig

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_GREETER_USE_DOTENV"
ENV_NAME = "LIB_GREETER_NAME"
ENV_GREETING = "LIB_GREETER_GREETING"
ENV_UPPERCASE = "LIB_GREETER_UPPERCASE"
ENV_BUFFER_SIZE = "LIB_GREETER_BUFFER_SIZE"
DEFAULT_BUFFER_SIZE = 128

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_STATE: dict[str, Path | None | bool] = {"attempted": False, "path": None}


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI flag wins over the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def _find_dotenv(search_from: Path | None) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found).resolve() if found else None
    # find_dotenv only starts from the cwd or the calling file.
    start = search_from.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` above ``search_from`` (default: the cwd).

    Existing environment variables keep precedence. The search runs once per
    process; later calls return the path found the first time.
    """

    if _DOTENV_STATE["attempted"]:
        return _DOTENV_STATE["path"]  # type: ignore[return-value]
    start = search_from or Path.cwd()
    path = _find_dotenv(search_from)
    _DOTENV_STATE["attempted"] = True
    _DOTENV_STATE["path"] = path
    if path is None:
        logger.debug("no .env file found", extra={"search_from": str(start)})
        return None
    load_dotenv(path, override=False)
    logger.debug("loaded .env file", extra={"dotenv_path": str(path)})
    return path


def _reset_dotenv_state_for_testing() -> None:
    _DOTENV_STATE["attempted"] = False
    _DOTENV_STATE["path"] = None


@dataclass(slots=True, frozen=True)
class GreeterSettings:
    """Resolved CLI settings: the greeter configuration plus the output capacity."""

    config: GreeterConfig
    buffer_size: int = DEFAULT_BUFFER_SIZE


def _env_text(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key)
    if value is None or value == "":
        return None
    return value


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    """Interpret ``1/true/yes/on`` style values.

    Examples
    --------
    >>> _env_bool({"FLAG": "On"}, "FLAG", default=False)
    True
    >>> _env_bool({}, "FLAG", default=True)
    True
    """

    value = environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _coerce_buffer_size(value: str | int | None) -> int:
    """Parse a non-negative buffer capacity.

    Examples
    --------
    >>> _coerce_buffer_size("64")
    64
    >>> _coerce_buffer_size(None)
    128
    >>> _coerce_buffer_size("-1")
    Traceback (most recent call last):
    ...
    ValueError: LIB_GREETER_BUFFER_SIZE must not be negative
    """

    if value is None or value == "":
        return DEFAULT_BUFFER_SIZE
    try:
        size = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{ENV_BUFFER_SIZE} must be an integer, got {value!r}") from exc
    if size < 0:
        raise ValueError(f"{ENV_BUFFER_SIZE} must not be negative")
    return size


def load_greeter_settings(
    *,
    name: str | None = None,
    greeting: str | None = None,
    uppercase: bool | None = None,
    buffer_size: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> GreeterSettings:
    """Merge explicit values over ``LIB_GREETER_*`` variables over defaults.

    ``None`` means "not given" for every argument. Unset name and greeting
    stay ``None`` in the returned config so the greeter applies its own
    defaults.

    Examples
    --------
    >>> settings = load_greeter_settings(environ={"LIB_GREETER_NAME": "Ada"}, greeting="Hi")
    >>> settings.config
    GreeterConfig(name='Ada', greeting='Hi', uppercase=False)
    >>> settings.buffer_size
    128
    """

    env = os.environ if environ is None else environ
    config = GreeterConfig(
        name=name if name is not None else _env_text(env, ENV_NAME),
        greeting=greeting if greeting is not None else _env_text(env, ENV_GREETING),
        uppercase=uppercase if uppercase is not None else _env_bool(env, ENV_UPPERCASE, default=False),
    )
    size = buffer_size if buffer_size is not None else _coerce_buffer_size(env.get(ENV_BUFFER_SIZE))
    if size < 0:
        raise ValueError("buffer_size must not be negative")
    return GreeterSettings(config=config, buffer_size=size)


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DOTENV_ENV_VAR",
    "ENV_BUFFER_SIZE",
    "ENV_GREETING",
    "ENV_NAME",
    "ENV_UPPERCASE",
    "GreeterSettings",
    "enable_dotenv",
    "load_greeter_settings",
    "should_use_dotenv",
]
