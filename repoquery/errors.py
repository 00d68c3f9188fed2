"""Error taxonomy for repository queries."""

from __future__ import annotations

from collections.abc import Sequence


class RepoQueryError(RuntimeError):
    """Base class for every failure raised by repoquery."""


class ConfigurationError(RepoQueryError):
    """Raised when settings loaded from the environment are invalid."""


class QueryExecutionError(RepoQueryError):
    """Raised when the query process fails, prints nothing, or writes to stderr."""

    def __init__(
        self,
        message: str,
        *,
        repo_url: str | None = None,
        package_spec: str | None = None,
        stderr: str = "",
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.repo_url = repo_url
        self.package_spec = package_spec
        self.stderr = stderr
        self.returncode = returncode


class ParserError(RepoQueryError):
    """Raised when query output cannot be parsed into a package revision."""


class AmbiguousPackageError(ParserError):
    """Raised when a package spec resolves to more than one file."""

    def __init__(self, message: str, *, package_spec: str, file_names: Sequence[str]) -> None:
        super().__init__(message)
        self.package_spec = package_spec
        self.file_names = list(file_names)


class MalformedOutputError(ParserError):
    """Raised when an output line does not carry the expected fields."""

    def __init__(self, message: str, *, line: str) -> None:
        super().__init__(message)
        self.line = line


class UnparseableTimestampError(ParserError):
    """Raised when a build time matches none of the known formats."""

    def __init__(self, message: str, *, build_time: str, expected_format: str | None = None) -> None:
        super().__init__(message)
        self.build_time = build_time
        self.expected_format = expected_format
