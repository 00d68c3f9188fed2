"""Pydantic models for repoquery parameters, process results and package revisions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from repoquery.constants import DEFAULT_EXECUTABLE, DEFAULT_LATEST_LIMIT, DEFAULT_TIMEOUT_SECONDS

DATA_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


class RepoQueryParams(BaseModel):
    """Immutable inputs for a single repository query."""

    model_config = ConfigDict(frozen=True)

    repo_id: str = Field(..., description="Logical id the repository is registered under for the query.")
    repo_url: str = Field(..., description="Repository URL shown in error messages.")
    package_spec: str = Field(..., description="Package spec, may contain version or glob constraints.")
    repo_path: str | None = Field(
        default=None,
        description="Source path or URL handed to --repofrompath. Defaults to repo_url.",
    )

    @field_validator("repo_id", "repo_url", "package_spec")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    @property
    def repo_from_id(self) -> str:
        return f"{self.repo_id},{self.repo_path or self.repo_url}"


class RepoQuerySettings(BaseModel):
    """Runtime settings for invoking the query executable."""

    executable: list[str] = Field(default_factory=lambda: [DEFAULT_EXECUTABLE])
    timeout_seconds: PositiveInt = DEFAULT_TIMEOUT_SECONDS
    latest_limit: PositiveInt = DEFAULT_LATEST_LIMIT
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("executable", mode="before")
    @classmethod
    def _ensure_list(cls, value: Any) -> list[str]:
        if value is None:
            return [DEFAULT_EXECUTABLE]
        if isinstance(value, list):
            return [str(item) for item in value]
        if isinstance(value, str):
            return [value]
        raise TypeError("executable must be a list of strings or a single string")

    @field_validator("executable")
    @classmethod
    def _require_executable(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("executable must not be empty")
        return value


@dataclass(frozen=True)
class ProcessOutput:
    """Exit code and captured lines of a finished query process."""

    returncode: int | None
    stdout: list[str] = field(default_factory=list)
    stderr: list[str] = field(default_factory=list)

    @property
    def is_zero_return_code(self) -> bool:
        return self.returncode == 0

    @property
    def has_output(self) -> bool:
        return bool(self.stdout)

    @property
    def has_errors(self) -> bool:
        return bool(self.stderr)

    @property
    def stderr_text(self) -> str:
        return "\n".join(self.stderr)


class PackageRevision(BaseModel):
    """A resolved package build as reported by the repository query.

    The parser attaches annotations through add_data before handing the
    revision over; from then on it belongs to the caller.
    """

    name: str = Field(..., description="Composed as name-version-release.arch.")
    timestamp: datetime
    packager: str | None = None
    revision_comment: str | None = None
    trackback_url: str | None = None
    data: dict[str, str | None] = Field(default_factory=dict)

    def add_data(self, key: str, value: str | None) -> None:
        """Attach an annotation to the revision.

        Keys may only contain alphanumeric characters and underscores.
        """

        if not key or not DATA_KEY_PATTERN.match(key):
            raise ValueError(
                f"Key '{key}' is invalid. Key names should consist of only alphanumeric characters and/or underscores."
            )
        self.data[key] = value

    def get_data(self, key: str) -> str | None:
        return self.data.get(key)
