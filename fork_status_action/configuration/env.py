"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from fork_status_action.utils.constants import (
    DEFAULT_BOT_COMMIT_MESSAGE,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_NEW_BRANCH_NAME,
    DEFAULT_TARGET_BRANCH,
    DEFAULT_UPSTREAM_FILE_PATH,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings. GITHUB_REPOSITORY and GITHUB_OUTPUT are provided
    # by the GitHub Actions runner.
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_TOKEN: str | None = None
    GITHUB_REPOSITORY: str | None = None
    GITHUB_OUTPUT: str | None = None

    # Action inputs
    EXCLUDED_REPOS: str = ""
    UPSTREAM_FILE_PATH: str = DEFAULT_UPSTREAM_FILE_PATH
    NEW_BRANCH_NAME: str = DEFAULT_NEW_BRANCH_NAME
    TARGET_BRANCH: str = DEFAULT_TARGET_BRANCH
    BOT_COMMIT_MESSAGE: str = DEFAULT_BOT_COMMIT_MESSAGE


settings = Settings()
