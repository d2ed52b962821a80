"""Contains results of application execution."""

from dataclasses import dataclass, field

from fork_status_action.schemas.fork_status import ForkStatus
from fork_status_action.synchronize.models import SyncOutcome


@dataclass(frozen=True)
class SyncPullRequestResult:
    """Contains results of reconciling the fork status pull request."""

    outcome: SyncOutcome
    url: str | None = None
    number: int | None = None

    @property
    def created(self) -> bool:
        """True if a new pull request was opened during this run."""
        return self.outcome == SyncOutcome.CREATED and self.number is not None


@dataclass
class BroadcastResult:
    """Contains results of annotating other open pull requests."""

    blocking_pull_request_number: int
    updated_pull_request_numbers: list[int] = field(default_factory=list)


@dataclass
class RunResult:
    """Contains results of a complete fork status run."""

    fork_status: ForkStatus
    sync_result: SyncPullRequestResult | None = None
    broadcast_result: BroadcastResult | None = None
