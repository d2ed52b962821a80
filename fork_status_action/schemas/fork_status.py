"""Pydantic schema for the fork status recorded in the marker file."""

from pydantic import BaseModel, ConfigDict


class ForkStatus(BaseModel):
    """Pydantic model for the fork status of a repository.

    ``parent`` is only set when the repository is a fork that is not excluded
    from synchronization. An empty status means no action is needed.
    """

    model_config = ConfigDict(frozen=True)

    parent: str | None = None

    @property
    def is_empty(self) -> bool:
        """True if the status does not require a pull request."""
        return self.parent is None

    def to_json(self) -> str:
        """Serialize to the marker file content, e.g. {"parent":"owner/repo"} or {}."""
        return self.model_dump_json(exclude_none=True)
