"""Query a yum repository for the latest revision matching a package spec."""

from __future__ import annotations

import logging
import os

from repoquery.config import load_settings
from repoquery.constants import DEFAULT_PARSER, QUERY_FORMAT
from repoquery.locks import RepoLockRegistry, get_lock_registry
from repoquery.models import PackageRevision, ProcessOutput, RepoQueryParams, RepoQuerySettings
from repoquery.parsers import BaseParser, get_parser
from repoquery.runner import ProcessRunner

logger = logging.getLogger("repoquery.command")


class RepoQueryCommand:
    """Run repoquery for one package spec and parse the result.

    Invocations against the same repository id are serialised; parsing the
    captured output happens outside the lock.
    """

    def __init__(
        self,
        params: RepoQueryParams,
        *,
        runner: ProcessRunner | None = None,
        settings: RepoQuerySettings | None = None,
        locks: RepoLockRegistry | None = None,
    ) -> None:
        self.params = params
        self.runner = runner or ProcessRunner()
        self.settings = settings if settings is not None else load_settings()
        self.locks = locks if locks is not None else get_lock_registry()
        self._parser: BaseParser = get_parser(DEFAULT_PARSER)

    async def execute(self) -> PackageRevision:
        output = await self.invoke()
        return self._parser.parse(output, self.params)

    async def invoke(self) -> ProcessOutput:
        command = self.build_command()
        async with self.locks.hold(self.params.repo_id):
            logger.debug("Querying repository '%s' for '%s'", self.params.repo_id, self.params.package_spec)
            return await self.runner.run(
                command,
                env=self._build_environment(),
                timeout_seconds=self.settings.timeout_seconds,
            )

    def build_command(self) -> list[str]:
        command = list(self.settings.executable)
        command.extend(
            [
                f"--latest-limit={self.settings.latest_limit}",
                f"--repofrompath={self.params.repo_from_id}",
                f"--repoid={self.params.repo_id}",
                "-q",
                self.params.package_spec,
                "--qf",
                QUERY_FORMAT,
            ]
        )
        return command

    def _build_environment(self) -> dict[str, str]:
        env = os.environ.copy()
        env.update(self.settings.env)
        return env
