# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Module containing application configuration for the github_runner_lifecycle library."""

from github_runner_lifecycle.configuration.base import (  # noqa: F401
    ApplicationConfiguration,
    RegistrationConfiguration,
)
from github_runner_lifecycle.configuration.github import (  # noqa: F401
    GitHubConfiguration,
    GitHubRepo,
    parse_github_path,
)
