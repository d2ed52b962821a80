"""Contains utility functions for GitHub interactions."""

from githubkit.exception import RequestFailed


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository in the format 'owner/repo' is required.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def parse_excluded_repositories(excluded_repos: str | None) -> frozenset[str]:
    """Parse a comma-separated list of repository full names, ignoring blanks."""
    if not excluded_repos:
        return frozenset()
    return frozenset(name.strip().strip("/").casefold() for name in excluded_repos.split(",") if name.strip())


def is_not_found_error(exc: BaseException) -> bool:
    """Return True if the exception is a GitHub 404 Not Found response."""
    return isinstance(exc, RequestFailed) and exc.response.status_code == 404
