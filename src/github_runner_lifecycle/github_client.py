# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""GitHub API client for the self-hosted runner endpoints of a repository."""
import functools
import logging
from http.client import HTTPException
from typing import Callable, ParamSpec, TypeVar
from urllib.error import HTTPError, URLError

# HTTP404NotFoundError is not found by pylint
from fastcore.net import HTTP404NotFoundError  # pylint: disable=no-name-in-module
from ghapi.all import GhApi
from ghapi.page import paged

from github_runner_lifecycle.configuration.github import GitHubRepo
from github_runner_lifecycle.errors import PlatformApiError, TokenError
from github_runner_lifecycle.types_.github import RegistrationToken, SelfHostedRunner

logger = logging.getLogger(__name__)


class GithubRunnerNotFoundError(Exception):
    """Represents an error when the runner could not be found on GitHub."""


# Number of runners requested per page, the maximum the API allows.
PAGE_SIZE = 100

# Parameters of the function decorated with catch_http_errors
ParamT = ParamSpec("ParamT")
# Return type of the function decorated with catch_http_errors
ReturnT = TypeVar("ReturnT")


def catch_http_errors(func: Callable[ParamT, ReturnT]) -> Callable[ParamT, ReturnT]:
    """Catch HTTP errors and raise custom exceptions.

    Args:
        func: The target function to catch common errors for.

    Returns:
        The decorated function.
    """

    @functools.wraps(func)
    def wrapper(*args: ParamT.args, **kwargs: ParamT.kwargs) -> ReturnT:
        """Catch common errors when using the GitHub API.

        Args:
            args: Placeholder for positional arguments.
            kwargs: Placeholder for keyword arguments.

        Raises:
            TokenError: If there was an error with the provided token.
            PlatformApiError: If there was an unexpected error using the GitHub API.

        Returns:
            The decorated function.
        """
        try:
            return func(*args, **kwargs)
        except HTTPError as exc:
            if exc.code in (401, 403):
                if exc.code == 401:
                    msg = "Invalid token."
                else:
                    msg = "Provided token has not enough permissions or has reached rate-limit."
                raise TokenError(msg) from exc
            raise PlatformApiError(f"GitHub API returned HTTP {exc.code}") from exc
        except URLError as exc:
            raise PlatformApiError(f"Unable to reach the GitHub API: {exc.reason}") from exc
        except (OSError, HTTPException) as exc:
            raise PlatformApiError(f"Connection to the GitHub API failed: {exc!r}") from exc

    return wrapper


class GithubClient:
    """GitHub API client."""

    def __init__(self, token: str):
        """Instantiate the GitHub API client.

        Args:
            token: GitHub personal token for API requests.
        """
        self._token = token
        self._client = GhApi(token=self._token)

    @catch_http_errors
    def list_runners(self, path: GitHubRepo) -> list[SelfHostedRunner]:
        """Get all runners information on GitHub under a repo.

        The pages are requested one by one until a page holds less than a full page of runners.

        Args:
            path: GitHub repository path in the format '<owner>/<repo>'.

        Returns:
            List of runner information, in the order GitHub returns them.
        """
        runners: list[SelfHostedRunner] = []
        paged_kwargs = {"owner": path.owner, "repo": path.repo, "per_page": PAGE_SIZE}
        for runners_page in paged(
            self._client.actions.list_self_hosted_runners_for_repo, **paged_kwargs
        ):
            page_runners = list(runners_page["runners"])
            logger.debug("Received %s runners from GitHub", len(page_runners))
            logger.debug("Response headers: %s", getattr(self._client, "recv_hdrs", None))
            runners.extend(SelfHostedRunner.build_from_github(runner) for runner in page_runners)
            # ghapi performs endless pagination, a page which is not full is the last one.
            if len(page_runners) < PAGE_SIZE:
                break

        logger.info("Got %s runners in total from GitHub for %s", len(runners), path.path())
        return runners

    @catch_http_errors
    def get_registration_token(self, path: GitHubRepo) -> RegistrationToken:
        """Get token from GitHub used for registering runners.

        Args:
            path: GitHub repository path in the format '<owner>/<repo>'.

        Returns:
            The registration token.
        """
        token = self._client.actions.create_registration_token_for_repo(
            owner=path.owner, repo=path.repo
        )
        return RegistrationToken.model_validate(dict(token))

    @catch_http_errors
    def delete_runner(self, path: GitHubRepo, runner_id: int) -> None:
        """Delete the self-hosted runner from GitHub.

        Args:
            path: GitHub repository path in the format '<owner>/<repo>'.
            runner_id: Id of the runner.

        Raises:
            GithubRunnerNotFoundError: If the runner is not found.
        """
        try:
            self._client.actions.delete_self_hosted_runner_from_repo(
                owner=path.owner,
                repo=path.repo,
                runner_id=runner_id,
            )
        except HTTP404NotFoundError as err:
            raise GithubRunnerNotFoundError from err
