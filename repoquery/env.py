"""Environment lookups for repoquery settings, with optional `.env` precedence."""

from __future__ import annotations

import os
from collections.abc import Mapping

from dotenv import dotenv_values, find_dotenv, load_dotenv

FORCE_OVERRIDE_ENV_VAR = "REPOQUERY_FORCE_ENV_OVERRIDE"

_dotenv: dict[str, str | None] = {}
_dotenv_wins = False


def reload_env(dotenv_mapping: Mapping[str, str | None] | None = None) -> None:
    """Re-read `.env` from the working directory.

    When ``REPOQUERY_FORCE_ENV_OVERRIDE=true`` is set in `.env`, its values take
    precedence over the process environment. Tests pass ``dotenv_mapping`` to
    skip the file entirely.
    """

    global _dotenv, _dotenv_wins

    path = "" if dotenv_mapping is not None else find_dotenv(usecwd=True)
    if dotenv_mapping is not None:
        _dotenv = dict(dotenv_mapping)
    else:
        _dotenv = dict(dotenv_values(path)) if path else {}

    _dotenv_wins = (_dotenv.get(FORCE_OVERRIDE_ENV_VAR) or "").strip().lower() == "true"
    if path:
        load_dotenv(dotenv_path=path, override=_dotenv_wins)


reload_env()


def get_env(key: str, default: str | None = None) -> str | None:
    if _dotenv_wins:
        value = _dotenv.get(key)
        return default if value is None else value
    return os.getenv(key, default)
