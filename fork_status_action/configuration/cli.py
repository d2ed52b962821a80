"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from fork_status_action.configuration.driver import get_action_config
from fork_status_action.configuration.exceptions import RequiredConfigurationElementError
from fork_status_action.configuration.models import ActionConfig
from fork_status_action.github.adapter import GitHubKitAdapter
from fork_status_action.synchronize.driver import run_fork_status_workflow
from fork_status_action.synchronize.fork_status import detect_fork_status
from fork_status_action.utils.actions import format_workflow_error
from fork_status_action.utils.log import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Record the upstream parent of a fork in a pull request.")

GitHubTokenOption = Annotated[str | None, Option("--github-token", help="GitHub token used as bearer credential. [env: GITHUB_TOKEN]")]
RepoOption = Annotated[str | None, Option("--repo", help="Repository name (owner/repo). [env: GITHUB_REPOSITORY]")]
ExcludedReposOption = Annotated[
    str | None, Option("--excluded-repos", help="Comma-separated repositories (owner/repo) to exclude. [env: EXCLUDED_REPOS]")
]
GitHubApiUrlOption = Annotated[str | None, Option("--github-api-url", help="GitHub API URL. [env: GITHUB_API_URL]")]
DebugOption = Annotated[bool, Option("--debug", help="Enable debug logging. [env: DEBUG]")]


def _resolve_config(**kwargs: object) -> ActionConfig:
    """Reconcile the configuration, exiting with an error annotation on failure."""
    try:
        return get_action_config(**kwargs)  # type: ignore[arg-type]
    except (RequiredConfigurationElementError, ValueError) as e:
        typer.echo(format_workflow_error(f"Invalid configuration: {e}"), err=True)
        raise typer.Exit(1) from e


@typer_app.command(name="run")
def run_cli(
    github_token: GitHubTokenOption = None,
    repo: RepoOption = None,
    excluded_repos: ExcludedReposOption = None,
    upstream_file_path: Annotated[
        str | None, Option("--upstream-file-path", help="Path of the marker file recording the upstream. [env: UPSTREAM_FILE_PATH]")
    ] = None,
    new_branch_name: Annotated[
        str | None, Option("--new-branch-name", help="Name of the branch carrying the marker file. [env: NEW_BRANCH_NAME]")
    ] = None,
    target_branch: Annotated[
        str | None, Option("--target-branch", help="Branch the pull request is opened against. [env: TARGET_BRANCH]")
    ] = None,
    bot_commit_message: Annotated[
        str | None, Option("--bot-commit-message", help="Commit message, pull request title and body. [env: BOT_COMMIT_MESSAGE]")
    ] = None,
    github_output: Annotated[
        str | None, Option("--github-output", help="File receiving the action outputs. [env: GITHUB_OUTPUT]")
    ] = None,
    github_api_url: GitHubApiUrlOption = None,
    debug: DebugOption = False,
) -> None:
    """Open a pull request recording the upstream parent of a fork and mark other open pull requests as blocked by it."""
    config = _resolve_config(
        debug=debug,
        github_api_url=github_api_url,
        github_token=github_token,
        repo=repo,
        excluded_repos=excluded_repos,
        upstream_file_path=upstream_file_path,
        new_branch_name=new_branch_name,
        target_branch=target_branch,
        bot_commit_message=bot_commit_message,
        github_output=github_output,
    )
    configure_logging(config.debug)
    logger.info("fork-status-action started", repository=config.repo)

    try:
        result = asyncio.run(run_fork_status_workflow(config))
    except Exception as e:
        logger.exception("Action failed", error=str(e))
        typer.echo(format_workflow_error(f"Action failed with error: {e}"), err=True)
        raise typer.Exit(1) from e

    if result.sync_result is not None and result.sync_result.created:
        typer.echo(f"PR created: {result.sync_result.url}")


@typer_app.command(name="detect")
def detect_cli(
    github_token: GitHubTokenOption = None,
    repo: RepoOption = None,
    excluded_repos: ExcludedReposOption = None,
    github_api_url: GitHubApiUrlOption = None,
    debug: DebugOption = False,
) -> None:
    """Print the fork status JSON for a repository without changing anything."""
    config = _resolve_config(
        debug=debug,
        github_api_url=github_api_url,
        github_token=github_token,
        repo=repo,
        excluded_repos=excluded_repos,
    )
    configure_logging(config.debug)

    async def run_detection() -> str:
        adapter = await GitHubKitAdapter.create(repo=config.repo, github_token=config.github_token, github_api_url=config.github_api_url)
        fork_status = await detect_fork_status(adapter, config.excluded_repos)
        return fork_status.to_json()

    try:
        fork_status_json = asyncio.run(run_detection())
    except Exception as e:
        logger.exception("Fork status detection failed", error=str(e))
        typer.echo(format_workflow_error(f"Fork status detection failed with error: {e}"), err=True)
        raise typer.Exit(1) from e
    typer.echo(fork_status_json)


if __name__ == "__main__":
    typer_app()
