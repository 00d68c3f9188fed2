"""
Pytest configuration for repoquery tests
"""

import sys
from pathlib import Path

import pytest

# Ensure the parent directory is in the Python path for imports
parent_dir = Path(__file__).resolve().parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import repoquery.env as env_config  # noqa: E402

# Ensure tests operate with runtime environment rather than .env overrides during imports
env_config.reload_env({"REPOQUERY_FORCE_ENV_OVERRIDE": "false"})

from repoquery.models import ProcessOutput, RepoQueryParams, RepoQuerySettings  # noqa: E402


@pytest.fixture
def params():
    return RepoQueryParams(repo_id="repo-1", repo_url="file:///var/repo", package_spec="go-server")


@pytest.fixture
def settings():
    return RepoQuerySettings(executable=["repoquery"], timeout_seconds=30)


@pytest.fixture
def success_output():
    def _build(*lines):
        return ProcessOutput(returncode=0, stdout=list(lines), stderr=[])

    return _build


@pytest.fixture(autouse=True)
def _reset_env_override():
    """Keep each test isolated from .env override state."""
    yield
    env_config.reload_env({"REPOQUERY_FORCE_ENV_OVERRIDE": "false"})
