"""Models for the synchronize module."""

from enum import Enum


class SyncOutcome(str, Enum):
    """Outcome of reconciling the fork status pull request."""

    CREATED = "created"
    ALREADY_SYNCED = "already_synced"
    ALREADY_PENDING = "already_pending"
    ALREADY_EXISTS = "already_exists"
