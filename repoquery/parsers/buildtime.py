"""Build time formats reported by the different repoquery releases."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from repoquery.errors import UnparseableTimestampError

RHEL_8_DATE_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class BuildTimeFormat:
    """Pairs a recognizer pattern with the function that decodes a matching token."""

    name: str
    pattern: re.Pattern[str]
    parse: Callable[[str], datetime]
    description: str

    def matches(self, token: str) -> bool:
        return self.pattern.fullmatch(token) is not None


def _parse_epoch_seconds(token: str) -> datetime:
    try:
        return datetime.fromtimestamp(int(token), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise UnparseableTimestampError(
            f"Build time `{token}` is out of range for epoch seconds",
            build_time=token,
            expected_format="epoch seconds",
        ) from exc


def _parse_rhel8(token: str) -> datetime:
    try:
        parsed = datetime.strptime(token, RHEL_8_DATE_FORMAT)
    except ValueError as exc:
        raise UnparseableTimestampError(
            f"Failed to parse buildTime `{token}` according to format: {RHEL_8_DATE_FORMAT}",
            build_time=token,
            expected_format=RHEL_8_DATE_FORMAT,
        ) from exc
    return parsed.replace(tzinfo=timezone.utc)


EPOCH_SECONDS = BuildTimeFormat(
    name="epoch",
    pattern=re.compile(r"\d+", re.ASCII),
    parse=_parse_epoch_seconds,
    description="epoch seconds",
)

# RHEL 8 repoquery prints a UTC date without seconds; the hour is not zero padded.
RHEL_8 = BuildTimeFormat(
    name="rhel8",
    pattern=re.compile(r"\d{4}-\d{2}-\d{2} \d{1,2}:\d{2}", re.ASCII),
    parse=_parse_rhel8,
    description=RHEL_8_DATE_FORMAT,
)

BUILD_TIME_FORMATS: tuple[BuildTimeFormat, ...] = (EPOCH_SECONDS, RHEL_8)


def parse_build_time(token: str, formats: tuple[BuildTimeFormat, ...] = BUILD_TIME_FORMATS) -> datetime:
    """Return the UTC build time for ``token`` using the first matching format."""

    for build_time_format in formats:
        if build_time_format.matches(token):
            return build_time_format.parse(token)

    expected = " or ".join(build_time_format.description for build_time_format in formats)
    raise UnparseableTimestampError(
        f"Don't know how to parse buildTime: {token}",
        build_time=token,
        expected_format=expected,
    )
