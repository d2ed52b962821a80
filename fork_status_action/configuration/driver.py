"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio

from fork_status_action.configuration import reconcile
from fork_status_action.configuration.models import ActionConfig


def get_action_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_token: str | None = None,
    repo: str | None = None,
    excluded_repos: str | None = None,
    upstream_file_path: str | None = None,
    new_branch_name: str | None = None,
    target_branch: str | None = None,
    bot_commit_message: str | None = None,
    github_output: str | None = None,
) -> ActionConfig:
    """Synchronously get the reconciled action configuration."""
    return asyncio.run(
        reconcile.reconcile_action_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_token=github_token,
            cli_repo=repo,
            cli_excluded_repos=excluded_repos,
            cli_upstream_file_path=upstream_file_path,
            cli_new_branch_name=new_branch_name,
            cli_target_branch=target_branch,
            cli_bot_commit_message=bot_commit_message,
            cli_github_output=github_output,
        )
    )
