"""Load repoquery settings from the environment."""

from __future__ import annotations

import logging
import shlex

from pydantic import ValidationError

from repoquery.constants import (
    DEFAULT_EXECUTABLE,
    DEFAULT_LATEST_LIMIT,
    DEFAULT_TIMEOUT_SECONDS,
    EXECUTABLE_ENV_VAR,
    LATEST_LIMIT_ENV_VAR,
    TIMEOUT_ENV_VAR,
)
from repoquery.env import get_env
from repoquery.errors import ConfigurationError
from repoquery.models import RepoQuerySettings

logger = logging.getLogger("repoquery.config")


def _read_int(key: str, default: int) -> int:
    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got '{raw}'") from exc


def load_settings(env: dict[str, str] | None = None) -> RepoQuerySettings:
    """Build settings from REPOQUERY_* variables, falling back to defaults."""

    executable_raw = get_env(EXECUTABLE_ENV_VAR) or DEFAULT_EXECUTABLE
    try:
        executable = shlex.split(executable_raw)
    except ValueError as exc:
        raise ConfigurationError(f"{EXECUTABLE_ENV_VAR} is not a valid command line: {exc}") from exc

    try:
        settings = RepoQuerySettings(
            executable=executable,
            timeout_seconds=_read_int(TIMEOUT_ENV_VAR, DEFAULT_TIMEOUT_SECONDS),
            latest_limit=_read_int(LATEST_LIMIT_ENV_VAR, DEFAULT_LATEST_LIMIT),
            env=dict(env or {}),
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid repoquery settings: {exc}") from exc

    logger.debug(
        "Loaded repoquery settings: executable=%s timeout=%ss latest_limit=%s",
        settings.executable,
        settings.timeout_seconds,
        settings.latest_limit,
    )
    return settings
