"""GitHub client adapter for the githubkit library."""

import base64
from functools import wraps
from typing import Any, Awaitable, Callable, Literal, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import RequestFailed
from githubkit.versions.latest.models import (
    FullRepository,
    IssueComment,
    PullRequest,
    PullRequestSimple,
)

from fork_status_action.utils.constants import DEFAULT_GITHUB_API_URL
from fork_status_action.utils.github import is_not_found_error, split_repository_in_configuration

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client
from .exceptions import PullRequestAlreadyExistsError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _get_error_details(exc: RequestFailed) -> tuple[str, list[Any]]:
    """Extract the message and the list of errors from a failed GitHub response."""
    try:
        error_data = exc.response.json()
    except Exception:
        error_data = {}
    if not isinstance(error_data, dict):
        error_data = {}
    return error_data.get("message", "Unprocessable Entity"), error_data.get("errors", [])


def _is_pull_request_already_exists(message: str, errors: list[Any]) -> bool:
    """Check whether a 422 response reports an already existing pull request."""
    error_messages = " ".join(e.get("message", "") for e in errors if isinstance(e, dict))
    return "already exists" in message.lower() or "already exists" in error_messages.lower()


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                message, errors = _get_error_details(exc)
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    url=getattr(exc.response, "url", None),
                    status_code=422,
                )
                raise ValueError(
                    f"GitHub 422 error in {func.__name__}: {message} | errors: {errors} | url: {getattr(exc.response, 'url', None)}"
                ) from exc
            raise

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @property
    def full_name(self) -> str:
        """Repository full name in 'owner/repo' format."""
        return f"{self.owner}/{self.repo_name}"

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(cls, repo: str, github_token: str, github_api_url: str = DEFAULT_GITHUB_API_URL) -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_token: Token used as bearer credential for all API calls
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            ValueError: If the repository is not in 'owner/repo' format
        """
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    # Repository CRUD
    async def get_repository(self) -> FullRepository:
        """Get the repository for the current client."""
        response: Response[FullRepository] = await self.client.rest.repos.async_get(owner=self.owner, repo=self.repo_name)
        return response.parsed_data

    # Branch CRUD
    async def branch_exists(self, branch_name: str) -> bool:
        """Check if a branch exists in the repository."""
        try:
            await self.client.rest.repos.async_get_branch(owner=self.owner, repo=self.repo_name, branch=branch_name)
            return True
        except RequestFailed as exc:
            if is_not_found_error(exc):
                return False
            raise

    @handle_github_422
    async def create_branch(self, branch_name: str, base_branch: str) -> None:
        """Create a new branch from the base branch."""
        try:
            base_ref = await self.client.rest.git.async_get_ref(owner=self.owner, repo=self.repo_name, ref=f"heads/{base_branch}")
        except RequestFailed as exc:
            # If a 409 conflict is raised, it means the base branch is empty.
            if exc.response.status_code == 409:
                logger.error(
                    f"A 409 Conflict was returned when accessing base branch '{base_branch}'. This may be because the branch is empty. "
                    f"You must have at least one commit on '{base_branch}' to create a pull request against it."
                )
            raise
        sha = base_ref.parsed_data.object_.sha
        await self.client.rest.git.async_create_ref(
            owner=self.owner,
            repo=self.repo_name,
            ref=f"refs/heads/{branch_name}",
            sha=sha,
        )
        logger.info("Created branch", branch=branch_name, base_branch=base_branch, sha=sha)

    async def delete_branch(self, branch_name: str) -> None:
        """Delete a branch from the repository."""
        await self.client.rest.git.async_delete_ref(owner=self.owner, repo=self.repo_name, ref=f"heads/{branch_name}")
        logger.info("Deleted branch", branch=branch_name)

    # File CRUD
    async def file_exists(self, file_path: str, ref: str) -> bool:
        """Check if a file exists on a specific branch, tag, or commit."""
        try:
            await self.client.rest.repos.async_get_content(owner=self.owner, repo=self.repo_name, path=file_path, ref=ref)
            return True
        except RequestFailed as exc:
            if is_not_found_error(exc):
                return False
            raise

    @handle_github_422
    async def commit_files_to_branch(
        self,
        branch_name: str,
        files: list[tuple[str, str]],  # (file_path, file_content)
        commit_message: str,
    ) -> None:
        """Commit or update files on a branch using the GitHub Contents API."""
        for file_path, file_content in files:
            # Check if the file exists to get its SHA (required for update)
            try:
                file_resp = await self.client.rest.repos.async_get_content(
                    owner=self.owner,
                    repo=self.repo_name,
                    path=file_path,
                    ref=branch_name,
                )
                file_sha = file_resp.parsed_data.sha
            except RequestFailed as exc:
                if is_not_found_error(exc):
                    file_sha = None
                else:
                    raise

            encoded_content = base64.b64encode(file_content.encode("utf-8")).decode("utf-8")
            params = {
                "owner": self.owner,
                "repo": self.repo_name,
                "path": file_path,
                "message": commit_message,
                "content": encoded_content,
                "branch": branch_name,
            }
            if file_sha:
                params["sha"] = file_sha
            await self.client.rest.repos.async_create_or_update_file_contents(**params)
            logger.info("Committed file to branch", file=file_path, branch=branch_name, updated=bool(file_sha))

    # Pull Request CRUD
    @handle_github_422
    async def create_pull_request(
        self,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
        draft: bool | None = None,
        maintainer_can_modify: bool | None = None,
        **kwargs: Any,
    ) -> PullRequest:
        """Create a pull request for a repository.

        Raises:
            PullRequestAlreadyExistsError: If GitHub reports an open pull request for the same head and base
        """
        params = self._omit_null_parameters(
            title=title,
            head=head,
            base=base,
            body=body,
            draft=draft,
            maintainer_can_modify=maintainer_can_modify,
            **kwargs,
        )
        try:
            response: Response[PullRequest] = await self.client.rest.pulls.async_create(
                owner=self.owner,
                repo=self.repo_name,
                **params,
            )
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                message, errors = _get_error_details(exc)
                if _is_pull_request_already_exists(message, errors):
                    raise PullRequestAlreadyExistsError(head=head, base=base, message=message) from exc
            raise
        return response.parsed_data

    @handle_github_422
    async def update_pull_request(
        self,
        pull_number: int,
        title: str | None = None,
        body: str | None = None,
        state: Literal["open", "closed"] | None = None,
        base: str | None = None,
        maintainer_can_modify: bool | None = None,
        **kwargs: Any,
    ) -> PullRequest:
        """Update a pull request for a repository."""
        params = self._omit_null_parameters(
            title=title,
            body=body,
            state=state,
            base=base,
            maintainer_can_modify=maintainer_can_modify,
            **kwargs,
        )
        response: Response[PullRequest] = await self.client.rest.pulls.async_update(
            owner=self.owner,
            repo=self.repo_name,
            pull_number=pull_number,
            **params,
        )
        return response.parsed_data

    async def list_pull_requests(
        self, state: Literal["open", "closed", "all"] = "all", per_page: int = 100, **kwargs: Any
    ) -> list[PullRequestSimple]:
        """List all pull requests for a repository, handling pagination.

        Extra keyword arguments are passed as filters, e.g. ``head="owner:branch"``
        and ``base="main"``.
        """
        all_pull_requests: list[PullRequestSimple] = []
        page: int = 1
        while True:
            response: Response[list[PullRequestSimple]] = await self.client.rest.pulls.async_list(
                owner=self.owner,
                repo=self.repo_name,
                state=state,
                per_page=per_page,
                page=page,
                **kwargs,
            )
            pull_requests: list[PullRequestSimple] = response.parsed_data
            if not pull_requests:
                break
            all_pull_requests.extend(pull_requests)
            if len(pull_requests) < per_page:
                break
            page += 1
        return all_pull_requests

    # Issue comments
    @handle_github_422
    async def create_issue_comment(self, issue_number: int, body: str) -> IssueComment:
        """Post a comment on an issue or pull request."""
        response: Response[IssueComment] = await self.client.rest.issues.async_create_comment(
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
            body=body,
        )
        return response.parsed_data
