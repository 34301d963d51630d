# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""The CLI entrypoint for github-runner-lifecycle application."""

import logging
import sys
from typing import Optional, TextIO

import click
import yaml

from github_runner_lifecycle.configuration import ApplicationConfiguration
from github_runner_lifecycle.errors import PlatformClientError, RunnerRegistrationTimeoutError
from github_runner_lifecycle.lifecycle import GitHubRunnerLifecycle


@click.group()
@click.option(
    "--config-file",
    type=click.File(mode="r", encoding="utf-8"),
    default=None,
    help=(
        "The file path containing the configurations. If not set, the configuration is read "
        "from the GitHub Actions environment."
    ),
)
@click.option(
    "--log-level",
    type=click.Choice(
        [
            "CRITICAL",
            "FATAL",
            "ERROR",
            "WARNING",
            "INFO",
            "DEBUG",
        ]
    ),
    default="INFO",
    help="The log level for the application.",
)
@click.pass_context
def main(ctx: click.Context, config_file: Optional[TextIO], log_level: str) -> None:
    """Manage the GitHub registration of an ephemeral self-hosted runner.

    Args:
        ctx: The click context.
        config_file: The configuration file.
        log_level: The log level.

    Raises:
        UsageError: If the configuration is missing or invalid.
    """
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    try:
        if config_file is not None:
            config = ApplicationConfiguration.from_yaml_file(config_file)
        else:
            config = ApplicationConfiguration.from_env()
    # pydantic ValidationError is a ValueError.
    except (ValueError, yaml.YAMLError) as exc:
        raise click.UsageError(f"Invalid configuration: {exc}") from exc
    ctx.obj = GitHubRunnerLifecycle.build(config)


@main.command(name="registration-token")
@click.pass_obj
def registration_token(lifecycle: GitHubRunnerLifecycle) -> None:
    """Print a new registration token for the repository.

    Args:
        lifecycle: The runner lifecycle of the repository.

    Raises:
        ClickException: If the token could not be created.
    """
    try:
        click.echo(lifecycle.get_registration_token())
    except PlatformClientError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command(name="get-runner")
@click.option("--label", type=str, default=None, help="Defaults to the configured label.")
@click.pass_obj
def get_runner(lifecycle: GitHubRunnerLifecycle, label: Optional[str]) -> None:
    """Print the runner with the label as JSON.

    Args:
        lifecycle: The runner lifecycle of the repository.
        label: The label of the runner.

    Raises:
        ClickException: If the runner is not found.
    """
    label = label or lifecycle.label
    runner = lifecycle.get_runner(label)
    if runner is None:
        raise click.ClickException(f"No runner with label {label} found")
    click.echo(runner.model_dump_json())


@main.command(name="wait")
@click.option("--label", type=str, default=None, help="Defaults to the configured label.")
@click.pass_obj
def wait(lifecycle: GitHubRunnerLifecycle, label: Optional[str]) -> None:
    """Wait for the runner with the label to be registered and online.

    Args:
        lifecycle: The runner lifecycle of the repository.
        label: The label of the runner.

    Raises:
        ClickException: If the runner did not register in time.
    """
    try:
        lifecycle.wait_for_runner_registered(label or lifecycle.label)
    except RunnerRegistrationTimeoutError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command(name="remove")
@click.pass_obj
def remove(lifecycle: GitHubRunnerLifecycle) -> None:
    """Remove the runner with the configured label from GitHub.

    Args:
        lifecycle: The runner lifecycle of the repository.

    Raises:
        ClickException: If the runner could not be removed.
    """
    try:
        lifecycle.remove_runner()
    except PlatformClientError as exc:
        raise click.ClickException(str(exc)) from exc
