"""Reconcile configuration between CLI arguments and environment variables."""

from fork_status_action.configuration.env import settings
from fork_status_action.configuration.exceptions import RequiredConfigurationElementError
from fork_status_action.configuration.models import ActionConfig
from fork_status_action.utils.constants import (
    DEFAULT_BOT_COMMIT_MESSAGE,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_NEW_BRANCH_NAME,
    DEFAULT_TARGET_BRANCH,
    DEFAULT_UPSTREAM_FILE_PATH,
)
from fork_status_action.utils.github import parse_excluded_repositories, split_repository_in_configuration


def _first_non_empty(*values: str | None) -> str | None:
    """Return the first value that is neither None nor an empty string."""
    for value in values:
        if value:
            return value
    return None


async def reconcile_action_configuration(
    cli_debug: bool,
    cli_github_api_url: str | None,
    cli_github_token: str | None,
    cli_repo: str | None,
    cli_excluded_repos: str | None,
    cli_upstream_file_path: str | None,
    cli_new_branch_name: str | None,
    cli_target_branch: str | None,
    cli_bot_commit_message: str | None,
    cli_github_output: str | None,
) -> ActionConfig:
    """Reconciles CLI arguments with environment variables into an ActionConfig.

    CLI arguments take precedence over environment variables, which take
    precedence over the defaults. Empty strings are treated as unset, so an
    empty action input falls back to its default.

    Raises:
        RequiredConfigurationElementError: If the GitHub token or the repository is missing.
        ValueError: If the repository is not in 'owner/repo' format.
    """
    github_token = _first_non_empty(cli_github_token, settings.GITHUB_TOKEN)
    if github_token is None:
        raise RequiredConfigurationElementError(name="GitHub token", cli_name="github_token", env_name="GITHUB_TOKEN")

    repo = _first_non_empty(cli_repo, settings.GITHUB_REPOSITORY)
    if repo is None:
        raise RequiredConfigurationElementError(name="Repository", cli_name="repo", env_name="GITHUB_REPOSITORY")
    owner, repository = await split_repository_in_configuration(repo)

    excluded_repos = _first_non_empty(cli_excluded_repos, settings.EXCLUDED_REPOS)

    return ActionConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=_first_non_empty(cli_github_api_url, settings.GITHUB_API_URL) or DEFAULT_GITHUB_API_URL,
        github_token=github_token,
        repo=f"{owner}/{repository}",
        upstream_file_path=_first_non_empty(cli_upstream_file_path, settings.UPSTREAM_FILE_PATH) or DEFAULT_UPSTREAM_FILE_PATH,
        new_branch_name=_first_non_empty(cli_new_branch_name, settings.NEW_BRANCH_NAME) or DEFAULT_NEW_BRANCH_NAME,
        target_branch=_first_non_empty(cli_target_branch, settings.TARGET_BRANCH) or DEFAULT_TARGET_BRANCH,
        bot_commit_message=_first_non_empty(cli_bot_commit_message, settings.BOT_COMMIT_MESSAGE) or DEFAULT_BOT_COMMIT_MESSAGE,
        excluded_repos=parse_excluded_repositories(excluded_repos),
        github_output=_first_non_empty(cli_github_output, settings.GITHUB_OUTPUT),
    )
