# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Module containing GitHub Configuration."""

from pydantic import BaseModel, Field


class GitHubRepo(BaseModel):
    """Represent GitHub repository.

    Attributes:
        owner: Owner of the GitHub repository.
        repo: Name of the GitHub repository.
    """

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)

    def path(self) -> str:
        """Return a string representing the path.

        Returns:
            Path to the GitHub entity.
        """
        return f"{self.owner}/{self.repo}"


class GitHubConfiguration(BaseModel):
    """GitHub configuration for the application.

    Attributes:
       token: GitHub Token.
       path: Information of the repository.
       label: The label uniquely identifying the managed runner.
    """

    token: str = Field(min_length=1)
    path: GitHubRepo
    label: str = Field(min_length=1)


def parse_github_path(path_str: str) -> GitHubRepo:
    """Parse GitHub path.

    Args:
        path_str: GitHub path in the format '<owner>/<repo>'.

    Raises:
        ValueError: if an invalid path string was given.

    Returns:
        GitHubRepo object representing the GitHub repository.
    """
    paths = tuple(segment for segment in path_str.split("/") if segment)
    if len(paths) != 2:
        raise ValueError(f"Invalid path configuration {path_str}")
    owner, repo = paths
    return GitHubRepo(owner=owner, repo=repo)
