#  Copyright 2025 Canonical Ltd.
#  See LICENSE file for licensing details.

"""Unit test setups and configurations."""

import secrets
from typing import Callable
from unittest.mock import MagicMock

import pytest

from github_runner_lifecycle.configuration import GitHubRepo
from github_runner_lifecycle.github_client import GithubClient

RawRunnerFactory = Callable[..., dict]


@pytest.fixture(name="github_repo")
def github_repo_fixture() -> GitHubRepo:
    """A GitHub repository with a random owner and name."""
    return GitHubRepo(owner=secrets.token_hex(8), repo=secrets.token_hex(8))


@pytest.fixture(name="github_client")
def github_client_fixture() -> GithubClient:
    """Create a GithubClient object with a mocked GhApi object."""
    gh_client = GithubClient("token")
    gh_client._client = MagicMock()
    return gh_client


@pytest.fixture(name="raw_runner")
def raw_runner_fixture() -> RawRunnerFactory:
    """Factory of runners as returned by the GitHub list runners endpoint."""

    def _raw_runner(
        runner_id: int, labels: tuple[str, ...] = (), status: str = "offline"
    ) -> dict:
        """Build a runner dict.

        Args:
            runner_id: The runner id.
            labels: The label names of the runner.
            status: The runner status.

        Returns:
            The runner in the GitHub API format.
        """
        return {
            "id": runner_id,
            "name": f"runner-{runner_id}",
            "os": "linux",
            "status": status,
            "busy": False,
            "labels": [
                {"id": index, "name": name, "type": "custom"}
                for index, name in enumerate(("self-hosted", *labels))
            ],
        }

    return _raw_runner
