# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Register, find and remove the self-hosted runner of a repository on GitHub."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from github_runner_lifecycle.configuration import (
    ApplicationConfiguration,
    GitHubRepo,
    RegistrationConfiguration,
)
from github_runner_lifecycle.errors import PlatformClientError
from github_runner_lifecycle.github_client import GithubClient, GithubRunnerNotFoundError
from github_runner_lifecycle.registration import RegistrationWaiter
from github_runner_lifecycle.types_.github import SelfHostedRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunnerList:
    """Result of listing the runners of the repository.

    Attributes:
        runners: The runners in listing order. Empty if the listing failed.
        error: The error if the listing failed.
    """

    runners: list[SelfHostedRunner] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        """Whether the listing succeeded."""
        return self.error is None


def find_runner_by_label(
    runners: Iterable[SelfHostedRunner], label: str
) -> Optional[SelfHostedRunner]:
    """Find the first runner carrying the label.

    Args:
        runners: The runners to search, in listing order.
        label: The exact label name.

    Returns:
        The first runner with the label, or None if no runner has it.
    """
    for runner in runners:
        if runner.has_label(label):
            return runner
    return None


class GitHubRunnerLifecycle:
    """Manage the self-hosted runner of a repository on GitHub side."""

    def __init__(
        self,
        path: GitHubRepo,
        label: str,
        github_client: GithubClient,
        registration_config: Optional[RegistrationConfiguration] = None,
    ):
        """Construct the object.

        Args:
            path: The GitHub repository.
            label: The label uniquely identifying the managed runner.
            github_client: GitHub client.
            registration_config: Timing of the wait for the runner registration.
        """
        self._path = path
        self._label = label
        self._client = github_client
        self._registration_config = registration_config or RegistrationConfiguration()

    @classmethod
    def build(cls, config: ApplicationConfiguration) -> "GitHubRunnerLifecycle":
        """Build a GitHubRunnerLifecycle.

        Args:
            config: The application configuration.

        Returns:
            A new GitHubRunnerLifecycle.
        """
        return cls(
            path=config.github_config.path,
            label=config.github_config.label,
            github_client=GithubClient(config.github_config.token),
            registration_config=config.registration,
        )

    @property
    def label(self) -> str:
        """The label of the managed runner."""
        return self._label

    def list_runners(self) -> RunnerList:
        """List all runners of the repository.

        Returns:
            The runners, or the error if they could not be listed.
        """
        try:
            return RunnerList(runners=self._client.list_runners(self._path))
        except PlatformClientError as err:
            logger.warning("Failed to list the runners of %s: %s", self._path.path(), err)
            return RunnerList(error=err)

    def get_runner(self, label: str) -> Optional[SelfHostedRunner]:
        """Get the runner with the label.

        A failure to list the runners is reported the same as a missing runner.

        Args:
            label: The label of the runner.

        Returns:
            The first runner with the label, or None if not found.
        """
        logger.info('Get runner with label "%s"', label)
        runner = find_runner_by_label(self.list_runners().runners, label)
        logger.info("Found result: %s", runner)
        return runner

    def get_registration_token(self) -> str:
        """Get a GitHub registration token for registering a self-hosted runner.

        Raises:
            PlatformClientError: If the token could not be created.

        Returns:
            The registration token.
        """
        try:
            token = self._client.get_registration_token(self._path)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.error("GitHub Registration Token receiving error")
            raise
        logger.info("GitHub Registration Token is received")
        return token.token

    def remove_runner(self) -> None:
        """Remove the runner with the configured label from GitHub.

        A runner which cannot be found is already removed.

        Raises:
            PlatformClientError: If the runner could not be deleted.
        """
        runner = self.get_runner(self._label)
        if runner is None:
            logger.info(
                "GitHub self-hosted runner with label %s is not found, so the removal is skipped",
                self._label,
            )
            return

        try:
            self._client.delete_runner(self._path, runner.id)
        except GithubRunnerNotFoundError:
            logger.info("GitHub self-hosted runner %s is already removed", runner.name)
            return
        except Exception:  # pylint: disable=broad-exception-caught
            logger.error("GitHub self-hosted runner removal error")
            raise
        logger.info("GitHub self-hosted runner %s is removed", runner.name)

    def wait_for_runner_registered(self, label: str) -> SelfHostedRunner:
        """Wait for the runner with the label to come online.

        Args:
            label: The label of the runner.

        Returns:
            The online runner.
        """
        waiter = RegistrationWaiter(self.get_runner, self._registration_config)
        return waiter.wait(label)
