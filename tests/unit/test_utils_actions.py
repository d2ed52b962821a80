"""Contains unit tests for the utils.actions module."""

from pathlib import Path

from fork_status_action.utils.actions import format_workflow_error, set_action_output


def test_set_action_output_appends_line(tmp_path: Path) -> None:
    """Test that outputs are appended as name=value lines."""
    output_file = tmp_path / "github_output"
    output_file.write_text("existing=1\n")
    assert set_action_output("pr-url", "https://github.com/acme/widget/pull/3", str(output_file)) is True
    assert set_action_output("pr-number", "3", str(output_file)) is True
    assert output_file.read_text() == "existing=1\npr-url=https://github.com/acme/widget/pull/3\npr-number=3\n"


def test_set_action_output_multiline_value(tmp_path: Path) -> None:
    """Test that multi-line values use the heredoc delimiter syntax."""
    output_file = tmp_path / "github_output"
    set_action_output("body", "line one\nline two", str(output_file))
    lines = output_file.read_text().splitlines()
    assert lines[0].startswith("body<<ghadelimiter_")
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[1:] == ["line one", "line two", delimiter]


def test_set_action_output_without_output_file() -> None:
    """Test that outputs are skipped when GITHUB_OUTPUT is not configured."""
    assert set_action_output("pr-url", "https://github.com/acme/widget/pull/3", None) is False


def test_format_workflow_error_single_line() -> None:
    """Test that error messages are flattened into a single workflow command."""
    assert format_workflow_error("Action failed\nwith error ") == "::error::Action failed with error"
