"""Unit tests for the configuration.reconcile module."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from fork_status_action.configuration.exceptions import RequiredConfigurationElementError
from fork_status_action.configuration.models import ActionConfig
from fork_status_action.configuration.reconcile import reconcile_action_configuration


@pytest.fixture
def mock_settings() -> Generator[MagicMock, None, None]:
    """Environment settings holding only the defaults."""
    with patch("fork_status_action.configuration.reconcile.settings") as mock_settings:
        mock_settings.DEBUG = False
        mock_settings.GITHUB_API_URL = "https://api.github.com"
        mock_settings.GITHUB_TOKEN = None
        mock_settings.GITHUB_REPOSITORY = None
        mock_settings.GITHUB_OUTPUT = None
        mock_settings.EXCLUDED_REPOS = ""
        mock_settings.UPSTREAM_FILE_PATH = ".github/UPSTREAM"
        mock_settings.NEW_BRANCH_NAME = "update-fork-status2"
        mock_settings.TARGET_BRANCH = "main"
        mock_settings.BOT_COMMIT_MESSAGE = "Automatically add UPSTREAM file"
        yield mock_settings


async def reconcile(**overrides: object) -> ActionConfig:
    """Call reconcile_action_configuration with every CLI value unset unless overridden."""
    kwargs: dict[str, object] = {
        "cli_debug": False,
        "cli_github_api_url": None,
        "cli_github_token": None,
        "cli_repo": None,
        "cli_excluded_repos": None,
        "cli_upstream_file_path": None,
        "cli_new_branch_name": None,
        "cli_target_branch": None,
        "cli_bot_commit_message": None,
        "cli_github_output": None,
    }
    kwargs.update(overrides)
    return await reconcile_action_configuration(**kwargs)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_reconcile_with_cli_args(mock_settings: MagicMock) -> None:
    """Test reconciliation when all values are provided via CLI arguments."""
    mock_settings.GITHUB_TOKEN = "env-token"
    mock_settings.GITHUB_REPOSITORY = "env/repo"

    # When
    result = await reconcile(
        cli_debug=True,
        cli_github_api_url="https://ghes.example.com/api/v3",
        cli_github_token="cli-token",
        cli_repo="acme/widget",
        cli_excluded_repos="acme/widget, other/repo",
        cli_upstream_file_path="UPSTREAM",
        cli_new_branch_name="fork-status",
        cli_target_branch="develop",
        cli_bot_commit_message="Record upstream",
        cli_github_output="/tmp/output",
    )

    # Then
    assert result == ActionConfig(
        debug=True,
        github_api_url="https://ghes.example.com/api/v3",
        github_token="cli-token",
        repo="acme/widget",
        upstream_file_path="UPSTREAM",
        new_branch_name="fork-status",
        target_branch="develop",
        bot_commit_message="Record upstream",
        excluded_repos=frozenset({"acme/widget", "other/repo"}),
        github_output="/tmp/output",
    )


@pytest.mark.asyncio
async def test_reconcile_with_env_vars(mock_settings: MagicMock) -> None:
    """Test reconciliation when values are provided via environment variables."""
    mock_settings.DEBUG = True
    mock_settings.GITHUB_TOKEN = "env-token"
    mock_settings.GITHUB_REPOSITORY = "env/repo"
    mock_settings.EXCLUDED_REPOS = "env/repo"
    mock_settings.TARGET_BRANCH = "trunk"
    mock_settings.GITHUB_OUTPUT = "/runner/output"

    # When
    result = await reconcile()

    # Then
    assert result.debug is True
    assert result.github_token == "env-token"
    assert result.repo == "env/repo"
    assert result.excluded_repos == frozenset({"env/repo"})
    assert result.target_branch == "trunk"
    assert result.github_output == "/runner/output"


@pytest.mark.asyncio
async def test_reconcile_defaults(mock_settings: MagicMock) -> None:
    """Test that unset inputs fall back to the action defaults."""
    result = await reconcile(cli_github_token="token", cli_repo="acme/widget")
    assert result.upstream_file_path == ".github/UPSTREAM"
    assert result.new_branch_name == "update-fork-status2"
    assert result.target_branch == "main"
    assert result.bot_commit_message == "Automatically add UPSTREAM file"
    assert result.excluded_repos == frozenset()
    assert result.github_output is None


@pytest.mark.asyncio
async def test_reconcile_empty_strings_fall_back_to_defaults(mock_settings: MagicMock) -> None:
    """Test that empty inputs, as passed by an unset action input, use the defaults."""
    mock_settings.UPSTREAM_FILE_PATH = ""
    mock_settings.NEW_BRANCH_NAME = ""
    result = await reconcile(
        cli_github_token="token",
        cli_repo="acme/widget",
        cli_upstream_file_path="",
        cli_new_branch_name="",
        cli_target_branch="",
        cli_bot_commit_message="",
        cli_github_api_url="",
    )
    assert result.upstream_file_path == ".github/UPSTREAM"
    assert result.new_branch_name == "update-fork-status2"
    assert result.target_branch == "main"
    assert result.bot_commit_message == "Automatically add UPSTREAM file"
    assert result.github_api_url == "https://api.github.com"


@pytest.mark.asyncio
async def test_reconcile_missing_token(mock_settings: MagicMock) -> None:
    """Test that a missing token names its CLI option and environment variable."""
    with pytest.raises(RequiredConfigurationElementError) as exc_info:
        await reconcile(cli_repo="acme/widget")
    assert exc_info.value.cli_name == "github_token"
    assert exc_info.value.env_name == "GITHUB_TOKEN"
    assert "environment variable GITHUB_TOKEN" in str(exc_info.value)


@pytest.mark.asyncio
async def test_reconcile_missing_repo(mock_settings: MagicMock) -> None:
    """Test that a missing repository is reported."""
    with pytest.raises(RequiredConfigurationElementError) as exc_info:
        await reconcile(cli_github_token="token")
    assert exc_info.value.env_name == "GITHUB_REPOSITORY"


@pytest.mark.asyncio
async def test_reconcile_malformed_repo(mock_settings: MagicMock) -> None:
    """Test that a malformed repository is rejected."""
    with pytest.raises(ValueError):
        await reconcile(cli_github_token="token", cli_repo="acme")


@pytest.mark.asyncio
async def test_reconcile_normalizes_repo_slashes(mock_settings: MagicMock) -> None:
    """Test that leading and trailing slashes are stripped from the repository."""
    result = await reconcile(cli_github_token="token", cli_repo="/acme/widget/")
    assert result.repo == "acme/widget"
