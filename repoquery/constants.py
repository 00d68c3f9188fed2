"""Internal defaults and constants for repoquery."""

from __future__ import annotations

DELIMITER = "<=>"

# Order matters: output lines are split positionally on DELIMITER.
QUERY_FIELDS: tuple[str, ...] = (
    "RELATIVEPATH",
    "NAME",
    "VERSION",
    "RELEASE",
    "ARCH",
    "BUILDTIME",
    "PACKAGER",
    "LOCATION",
    "URL",
)
QUERY_FORMAT = DELIMITER.join(f"%{{{field}}}" for field in QUERY_FIELDS)

NONE_TOKEN = "NONE"
PACKAGE_LOCATION = "LOCATION"

DEFAULT_EXECUTABLE = "repoquery"
DEFAULT_TIMEOUT_SECONDS = 300
DEFAULT_LATEST_LIMIT = 1
DEFAULT_PARSER = "repoquery"

EXECUTABLE_ENV_VAR = "REPOQUERY_EXECUTABLE"
TIMEOUT_ENV_VAR = "REPOQUERY_TIMEOUT_SECONDS"
LATEST_LIMIT_ENV_VAR = "REPOQUERY_LATEST_LIMIT"
