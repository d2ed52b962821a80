"""Contains unit tests for the utils.github module."""

from unittest.mock import MagicMock

import pytest
from githubkit.exception import RequestFailed

from fork_status_action.utils.github import is_not_found_error, parse_excluded_repositories, split_repository_in_configuration


@pytest.mark.asyncio
async def test_split_repository_valid() -> None:
    """Test splitting a valid owner/repo string."""
    owner, repo = await split_repository_in_configuration("octocat/Hello-World")
    assert owner == "octocat"
    assert repo == "Hello-World"


@pytest.mark.asyncio
async def test_split_repository_missing() -> None:
    """Test that ValueError is raised if repo is None."""
    with pytest.raises(ValueError, match="owner/repo"):
        await split_repository_in_configuration(None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "malformed_repo",
    [
        pytest.param("", id="empty string"),
        pytest.param("/", id="only a slash"),
        pytest.param("octocat-HelloWorld", id="no slash"),
        pytest.param("owner/repo/extra", id="too many parts"),
    ],
)
async def test_split_repository_various_malformed(malformed_repo: str) -> None:
    """Test that ValueError is raised if repo is malformed (various cases)."""
    with pytest.raises(ValueError):
        await split_repository_in_configuration(malformed_repo)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "repo_input,expected_owner,expected_repo",
    [
        pytest.param("/octocat/Hello-World", "octocat", "Hello-World", id="leading slash"),
        pytest.param("octocat/Hello-World/", "octocat", "Hello-World", id="trailing slash"),
        pytest.param("/octocat/Hello-World/", "octocat", "Hello-World", id="both slashes"),
    ],
)
async def test_split_repository_strips_slashes(repo_input: str, expected_owner: str, expected_repo: str) -> None:
    """Test that leading/trailing slashes are stripped and owner/repo are parsed correctly."""
    owner, repo = await split_repository_in_configuration(repo_input)
    assert owner == expected_owner
    assert repo == expected_repo


@pytest.mark.parametrize(
    "excluded_repos,expected",
    [
        pytest.param(None, frozenset(), id="none"),
        pytest.param("", frozenset(), id="empty string"),
        pytest.param(" , ,", frozenset(), id="only separators"),
        pytest.param("acme/widget", frozenset({"acme/widget"}), id="single"),
        pytest.param(" acme/widget , Acme/Gadget ", frozenset({"acme/widget", "acme/gadget"}), id="trimmed and casefolded"),
    ],
)
def test_parse_excluded_repositories(excluded_repos: str | None, expected: frozenset[str]) -> None:
    """Test parsing of the comma-separated exclusion list."""
    assert parse_excluded_repositories(excluded_repos) == expected


@pytest.mark.parametrize("status_code,expected", [(404, True), (403, False), (500, False)])
def test_is_not_found_error(status_code: int, expected: bool) -> None:
    """Test that only 404 RequestFailed errors count as not found."""
    response = MagicMock()
    response.status_code = status_code
    assert is_not_found_error(RequestFailed(response)) is expected


def test_is_not_found_error_other_exception() -> None:
    """Test that exceptions other than RequestFailed are never not found."""
    assert is_not_found_error(Exception("Not found")) is False
