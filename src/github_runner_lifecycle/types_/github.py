# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Module containing GitHub API related types."""


from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class GitHubRunnerStatus(str, Enum):
    """Status of runner on GitHub.

    Attributes:
        ONLINE: Represents an online runner status.
        OFFLINE: Represents an offline runner status.
    """

    ONLINE = "online"
    OFFLINE = "offline"


class SelfHostedRunnerLabel(BaseModel):
    """A single label of self-hosted runners.

    Attributes:
        name: Name of the label.
    """

    model_config = ConfigDict(frozen=True)

    name: str


# See response schema for
# https://docs.github.com/en/rest/actions/self-hosted-runners?apiVersion=2022-11-28#list-self-hosted-runners-for-a-repository
class SelfHostedRunner(BaseModel):
    """Information on a single self-hosted runner.

    Attributes:
        id: Unique identifier of the runner.
        name: Name of the runner.
        status: The Github runner status.
        labels: Labels of the runner, in the order GitHub returns them.
        os: Operating system of the runner.
        busy: Whether the runner is executing a job.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    status: GitHubRunnerStatus
    labels: list[SelfHostedRunnerLabel]
    os: Optional[str] = None
    busy: bool = False

    @classmethod
    def build_from_github(cls, github_dict: dict) -> "SelfHostedRunner":
        """Build a SelfHostedRunner from the GitHub runner information.

        Args:
            github_dict: GitHub dictionary from the list runners endpoint.

        Returns:
            A SelfHostedRunner from the input data.
        """
        # Pydantic does not correctly parse labels, they are of type fastcore.foundation.L.
        runner = dict(github_dict)
        runner["labels"] = [dict(label) for label in runner.get("labels", [])]
        return cls.model_validate(runner)

    def has_label(self, label: str) -> bool:
        """Whether the runner carries a label with the exact given name.

        Args:
            label: The label name to look for.

        Returns:
            True if one of the labels has the name.
        """
        for runner_label in self.labels:
            if runner_label.name == label:
                return True
        return False


class RegistrationToken(BaseModel):
    """Token used for registering GitHub runners.

    Attributes:
        token: Token for registering GitHub runners.
        expires_at: Time the token expires at.
    """

    token: str
    expires_at: str
