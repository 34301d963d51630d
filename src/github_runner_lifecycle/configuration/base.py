# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Base configuration for the Application."""

import logging
import os
from typing import Mapping, Optional, TextIO

import yaml
from pydantic import BaseModel, Field, model_validator

from github_runner_lifecycle.configuration import github

logger = logging.getLogger(__name__)

# Names of the environment variables GitHub Actions exposes the step inputs and context with.
GITHUB_TOKEN_ENV_NAME = "INPUT_GITHUB-TOKEN"
LABEL_ENV_NAME = "INPUT_LABEL"
REPOSITORY_ENV_NAME = "GITHUB_REPOSITORY"


class RegistrationConfiguration(BaseModel):
    """Timing of the wait for a new runner to register.

    Attributes:
        quiet_period: Seconds to wait before the first check, for the instance to boot.
        interval: Seconds between two checks.
        timeout: Seconds of accumulated wait after which the registration has failed.
    """

    quiet_period: float = Field(30, ge=0)
    interval: float = Field(10, gt=0)
    timeout: float = Field(300, gt=0)

    @model_validator(mode="after")
    def check_interval(self) -> "RegistrationConfiguration":
        """Validate the interval is not larger than the timeout.

        Raises:
            ValueError: if the interval exceeds the timeout.

        Returns:
            The validated configuration.
        """
        if self.interval > self.timeout:
            raise ValueError("registration interval must not exceed the registration timeout")
        return self


class ApplicationConfiguration(BaseModel):
    """Main entry point for the Application Configuration.

    Attributes:
        github_config: GitHub configuration.
        registration: Timing for waiting on the runner registration.
    """

    github_config: github.GitHubConfiguration
    registration: RegistrationConfiguration = Field(default_factory=RegistrationConfiguration)

    @staticmethod
    def from_yaml_file(file: TextIO) -> "ApplicationConfiguration":
        """Initialize configuration from a YAML formatted file.

        Args:
            file: The file object to parse the configuration from.

        Returns:
            The configuration.
        """
        config = yaml.safe_load(file)
        return ApplicationConfiguration.model_validate(config)

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "ApplicationConfiguration":
        """Initialize configuration from the GitHub Actions environment.

        Args:
            environ: The environment to read from. Defaults to the process environment.

        Raises:
            ValueError: if a required environment variable is not set.

        Returns:
            The configuration.
        """
        if environ is None:
            environ = os.environ
        missing = [
            name
            for name in (GITHUB_TOKEN_ENV_NAME, LABEL_ENV_NAME, REPOSITORY_ENV_NAME)
            if not environ.get(name)
        ]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")
        logger.debug("Loading configuration for repository %s", environ[REPOSITORY_ENV_NAME])
        return ApplicationConfiguration(
            github_config=github.GitHubConfiguration(
                token=environ[GITHUB_TOKEN_ENV_NAME],
                path=github.parse_github_path(environ[REPOSITORY_ENV_NAME]),
                label=environ[LABEL_ENV_NAME],
            ),
        )
