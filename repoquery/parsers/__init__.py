"""Parser registry for repoquery."""

from __future__ import annotations

from .base import BaseParser, ParserError
from .buildtime import BUILD_TIME_FORMATS, BuildTimeFormat, parse_build_time
from .repoquery import RepoQueryOutputParser

_PARSER_CLASSES: dict[str, type[BaseParser]] = {
    RepoQueryOutputParser.name: RepoQueryOutputParser,
}


def get_parser(name: str) -> BaseParser:
    normalized = (name or "").lower()
    if normalized not in _PARSER_CLASSES:
        raise ParserError(f"No parser registered for '{name}'")
    parser_cls = _PARSER_CLASSES[normalized]
    return parser_cls()


__all__ = [
    "BUILD_TIME_FORMATS",
    "BaseParser",
    "BuildTimeFormat",
    "ParserError",
    "RepoQueryOutputParser",
    "get_parser",
    "parse_build_time",
]
