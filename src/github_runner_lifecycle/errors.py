# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Errors used by the runner lifecycle."""
from __future__ import annotations


class PlatformClientError(Exception):
    """Base class for all github client errors."""


class PlatformApiError(PlatformClientError):
    """Represents an error when the GitHub API returns an error."""


class TokenError(PlatformClientError):
    """Represents an error when the token is invalid or has not enough permissions."""


class RunnerLifecycleError(Exception):
    """Base class for runner lifecycle errors."""


class RunnerRegistrationTimeoutError(RunnerLifecycleError):
    """Represents the runner not coming online within the registration timeout."""
