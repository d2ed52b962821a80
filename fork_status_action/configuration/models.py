"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ActionConfig:
    """Resolved configuration for a single fork status run.

    Built once by the configuration reconciliation step and passed explicitly
    to every stage of the workflow.
    """

    debug: bool
    github_api_url: str
    github_token: str
    repo: str
    upstream_file_path: str
    new_branch_name: str
    target_branch: str
    bot_commit_message: str
    excluded_repos: frozenset[str] = field(default_factory=frozenset)
    github_output: str | None = None
