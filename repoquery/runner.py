"""Execute the repoquery binary and capture its output line by line."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Mapping, Sequence

from repoquery.errors import QueryExecutionError
from repoquery.models import ProcessOutput

logger = logging.getLogger("repoquery.runner")

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split on line terminators only; a final terminator does not start a new line."""

    if not text:
        return []
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


class ProcessRunner:
    """Run a command to completion and return its exit code and output lines."""

    async def run(
        self,
        command: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        timeout_seconds: float | None = None,
    ) -> ProcessOutput:
        logger.debug("Executing command: %s", " ".join(command))

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=dict(env) if env is not None else None,
            )
        except FileNotFoundError as exc:
            raise QueryExecutionError(f"Executable not found for command '{command[0]}': {exc}") from exc

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(process.communicate(), timeout=timeout_seconds)
        except asyncio.TimeoutError as exc:
            process.kill()
            await process.communicate()
            raise QueryExecutionError(
                f"Command '{command[0]}' timed out after {timeout_seconds} seconds",
                returncode=None,
            ) from exc

        stdout_text = stdout_bytes.decode("utf-8", errors="replace")
        stderr_text = stderr_bytes.decode("utf-8", errors="replace")
        logger.debug("Command '%s' exited with status %s", command[0], process.returncode)

        return ProcessOutput(
            returncode=process.returncode,
            stdout=split_lines(stdout_text),
            stderr=split_lines(stderr_text),
        )
