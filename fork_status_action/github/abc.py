"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any, Literal


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Repository CRUD
    @abstractmethod
    async def get_repository(self) -> Any:
        """Get a repository."""
        pass

    # Branch CRUD
    @abstractmethod
    async def branch_exists(self, branch_name: str) -> bool:
        """Check if a branch exists in the repository."""
        pass

    @abstractmethod
    async def create_branch(self, branch_name: str, base_branch: str) -> None:
        """Create a new branch from the tip of the base branch."""
        pass

    @abstractmethod
    async def delete_branch(self, branch_name: str) -> None:
        """Delete a branch from the repository."""
        pass

    # File CRUD
    @abstractmethod
    async def file_exists(self, file_path: str, ref: str) -> bool:
        """Check if a file exists on a specific branch, tag, or commit."""
        pass

    @abstractmethod
    async def commit_files_to_branch(self, branch_name: str, files: list[tuple[str, str]], commit_message: str) -> None:
        """Commit or update files on a branch."""
        pass

    # Pull Request CRUD
    @abstractmethod
    async def create_pull_request(
        self,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
        draft: bool | None = None,
        maintainer_can_modify: bool | None = None,
        **kwargs: Any,
    ) -> Any:
        """Create a pull request for a repository."""
        pass

    @abstractmethod
    async def update_pull_request(
        self,
        pull_number: int,
        title: str | None = None,
        body: str | None = None,
        state: Literal["open", "closed"] | None = None,
        base: str | None = None,
        maintainer_can_modify: bool | None = None,
        **kwargs: Any,
    ) -> Any:
        """Update a pull request for a repository."""
        pass

    @abstractmethod
    async def list_pull_requests(self, state: Literal["open", "closed", "all"] | None = "all", **kwargs: Any) -> list[Any]:
        """List pull requests for a repository."""
        pass

    # Issue comments (pull requests are issues for commenting purposes)
    @abstractmethod
    async def create_issue_comment(self, issue_number: int, body: str) -> Any:
        """Post a comment on an issue or pull request."""
        pass
