"""Public helpers for querying yum repositories with repoquery."""

from __future__ import annotations

from .command import RepoQueryCommand
from .errors import (
    AmbiguousPackageError,
    ConfigurationError,
    MalformedOutputError,
    ParserError,
    QueryExecutionError,
    RepoQueryError,
    UnparseableTimestampError,
)
from .models import PackageRevision, ProcessOutput, RepoQueryParams, RepoQuerySettings

__all__ = [
    "AmbiguousPackageError",
    "ConfigurationError",
    "MalformedOutputError",
    "PackageRevision",
    "ParserError",
    "ProcessOutput",
    "QueryExecutionError",
    "RepoQueryCommand",
    "RepoQueryError",
    "RepoQueryParams",
    "RepoQuerySettings",
    "UnparseableTimestampError",
]
