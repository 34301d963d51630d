# Copyright 2025 Canonical Ltd.
# See LICENSE file for licensing details.

"""Package for managing the GitHub side of ephemeral self-hosted runners."""
