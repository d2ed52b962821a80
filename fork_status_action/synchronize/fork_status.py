"""Contains logic for detecting whether a repository is a fork."""

from collections.abc import Collection

import structlog
from githubkit.versions.latest.models import FullRepository

from fork_status_action.github.adapter import GitHubKitAdapter
from fork_status_action.schemas.fork_status import ForkStatus

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def repository_is_excluded(repository_full_name: str, excluded_repos: Collection[str]) -> bool:
    """Check if a repository is in the exclusion set (case-insensitive)."""
    excluded = {name.casefold() for name in excluded_repos}
    return repository_full_name.casefold() in excluded


async def decide_fork_status(repository: FullRepository, excluded_repos: Collection[str]) -> ForkStatus:
    """Classify repository metadata into a fork status."""
    if not repository.fork:
        logger.info("Repository is not a fork", repository=repository.full_name)
        return ForkStatus()

    if not repository.parent:
        raise ValueError(f"Repository {repository.full_name} is a fork but GitHub returned no parent repository")

    parent_full_name = repository.parent.full_name
    logger.info("Repository is a fork", repository=repository.full_name, parent=parent_full_name)
    if await repository_is_excluded(repository.full_name, excluded_repos):
        logger.info("Repository is excluded from fork status synchronization", repository=repository.full_name)
        return ForkStatus()
    return ForkStatus(parent=parent_full_name)


async def detect_fork_status(github_adapter: GitHubKitAdapter, excluded_repos: Collection[str]) -> ForkStatus:
    """Fetch repository metadata and determine whether a fork status pull request is needed."""
    logger.info("Fetching fork parent repository info", repository=github_adapter.full_name)
    repository = await github_adapter.get_repository()
    return await decide_fork_status(repository, excluded_repos)
