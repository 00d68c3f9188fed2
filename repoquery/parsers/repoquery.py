"""Parser for `repoquery --qf` output delimited with ``<=>``."""

from __future__ import annotations

import logging

from repoquery.constants import DELIMITER, NONE_TOKEN, PACKAGE_LOCATION, QUERY_FIELDS
from repoquery.errors import AmbiguousPackageError, MalformedOutputError, QueryExecutionError
from repoquery.models import PackageRevision, ProcessOutput, RepoQueryParams

from .base import BaseParser
from .buildtime import parse_build_time

logger = logging.getLogger("repoquery.parser")


def package_tag_value(value: str) -> str | None:
    """Map the ``NONE`` placeholder repoquery prints for missing tags to None."""

    return None if value.upper() == NONE_TOKEN else value


def file_name_of(line: str) -> str:
    relative_path = line.split(DELIMITER, 1)[0]
    return relative_path.rsplit("/", 1)[-1]


class RepoQueryOutputParser(BaseParser):
    """Turn the output of a single repoquery invocation into a package revision."""

    name = "repoquery"

    def parse(self, output: ProcessOutput | None, params: RepoQueryParams) -> PackageRevision:
        output = self.check_successful(output, params)

        # Blank lines count towards the ambiguity check just like the tool emitted them.
        if len(output.stdout) > 1:
            file_names = [file_name_of(line) for line in output.stdout]
            message = (
                f"Given Package Spec ({params.package_spec}) resolves to more than one file on the repository: "
                f"{', '.join(file_names)}"
            )
            logger.info(message)
            raise AmbiguousPackageError(message, package_spec=params.package_spec, file_names=file_names)

        return self.parse_line(output.stdout[0])

    def check_successful(self, output: ProcessOutput | None, params: RepoQueryParams) -> ProcessOutput:
        if output is not None and output.is_zero_return_code and output.has_output and not output.has_errors:
            return output

        stderr_text = output.stderr_text if output is not None else ""
        message = (
            f"Error while querying repository with path '{params.repo_url}' and package spec "
            f"'{params.package_spec}'. {stderr_text}"
        )
        logger.info(message)
        raise QueryExecutionError(
            message,
            repo_url=params.repo_url,
            package_spec=params.package_spec,
            stderr=stderr_text,
            returncode=output.returncode if output is not None else None,
        )

    def parse_line(self, line: str) -> PackageRevision:
        parts = line.split(DELIMITER)
        if len(parts) != len(QUERY_FIELDS):
            raise MalformedOutputError(
                f"Expected {len(QUERY_FIELDS)} fields separated by '{DELIMITER}' but found {len(parts)}: {line}",
                line=line,
            )

        _relative_path, name, version, release, arch, build_time, packager, location, url = parts

        revision = PackageRevision(
            name=f"{name}-{version}-{release}.{arch}",
            timestamp=parse_build_time(build_time),
            packager=package_tag_value(packager),
            trackback_url=package_tag_value(url),
        )
        try:
            revision.add_data(PACKAGE_LOCATION, package_tag_value(location))
        except Exception as exc:  # annotation failures never fail the parse
            logger.warning("Could not add data key. Reason : %s", exc)
        return revision
