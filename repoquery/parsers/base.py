"""Parser interfaces for repository query output."""

from __future__ import annotations

from repoquery.errors import ParserError
from repoquery.models import PackageRevision, ProcessOutput, RepoQueryParams

__all__ = ["BaseParser", "ParserError"]


class BaseParser:
    """Base interface for query output parsers."""

    name: str = "base"

    def parse(self, output: ProcessOutput | None, params: RepoQueryParams) -> PackageRevision:
        raise NotImplementedError("Parsers must implement parse()")
