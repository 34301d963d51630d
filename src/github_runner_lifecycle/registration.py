# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Wait for a freshly launched instance to register as an online GitHub runner."""

import logging
import time
from enum import Enum
from typing import Callable, Optional

from github_runner_lifecycle.configuration import RegistrationConfiguration
from github_runner_lifecycle.errors import RunnerRegistrationTimeoutError
from github_runner_lifecycle.types_.github import GitHubRunnerStatus, SelfHostedRunner

logger = logging.getLogger(__name__)

LocateRunner = Callable[[str], Optional[SelfHostedRunner]]


class RegistrationState(str, Enum):
    """State of the wait for the runner registration.

    Attributes:
        QUIET_PERIOD: Waiting for the instance to boot, no check is done.
        POLLING: Checking the runner status on every interval.
        REGISTERED: The runner is online.
        TIMED_OUT: The runner did not come online within the timeout.
    """

    QUIET_PERIOD = "quiet_period"
    POLLING = "polling"
    REGISTERED = "registered"
    TIMED_OUT = "timed_out"


class RegistrationWaiter:
    """Poll for a runner by label until it is online or the timeout is exceeded.

    Attributes:
        state: The current state of the wait.
    """

    def __init__(self, locate: LocateRunner, config: RegistrationConfiguration):
        """Construct the object.

        Args:
            locate: Finds the runner by label, returning None if it is not found.
            config: The timing of the wait.
        """
        self._locate = locate
        self._config = config
        self.state: Optional[RegistrationState] = None

    @property
    def timeout_minutes(self) -> float:
        """The registration timeout in minutes."""
        return self._config.timeout / 60

    def wait(self, label: str) -> SelfHostedRunner:
        """Block until the runner with the label is online.

        Every interval the timeout is checked first, then the runner status. The wait time is
        accumulated in interval steps and not read from a clock.

        Args:
            label: The label of the runner.

        Raises:
            RunnerRegistrationTimeoutError: If the runner is not online within the timeout.

        Returns:
            The online runner.
        """
        self.state = RegistrationState.QUIET_PERIOD
        logger.info(
            "Waiting %ss for the instance to be registered in GitHub as a new self-hosted runner",
            self._config.quiet_period,
        )
        time.sleep(self._config.quiet_period)

        self.state = RegistrationState.POLLING
        logger.info(
            "Checking every %ss if the GitHub self-hosted runner is registered",
            self._config.interval,
        )
        waited = 0.0
        while True:
            time.sleep(self._config.interval)

            if waited > self._config.timeout:
                self.state = RegistrationState.TIMED_OUT
                logger.error("GitHub self-hosted runner registration error")
                raise RunnerRegistrationTimeoutError(
                    f"A timeout of {self.timeout_minutes:g} minutes is exceeded. Your instance "
                    "was not able to register itself in GitHub as a new self-hosted runner."
                )

            runner = self._locate(label)
            if runner is not None and runner.status == GitHubRunnerStatus.ONLINE:
                self.state = RegistrationState.REGISTERED
                logger.info(
                    "GitHub self-hosted runner %s is registered and ready to use", runner.name
                )
                return runner

            waited += self._config.interval
            logger.info("Checking...")
