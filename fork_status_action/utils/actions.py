"""Helpers for talking to the GitHub Actions runner."""

import uuid
from pathlib import Path

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def format_workflow_error(message: str) -> str:
    """Format a message as a single-line ``::error::`` workflow command."""
    safe_message = " ".join(message.splitlines()).strip()
    return f"::error::{safe_message}"


def set_action_output(name: str, value: str, github_output: str | None) -> bool:
    """Append an output to the runner's GITHUB_OUTPUT file.

    Multi-line values use the heredoc delimiter syntax supported by the runner.
    Returns False when no output file is configured (e.g. a local run).
    """
    if not github_output:
        logger.info("GITHUB_OUTPUT is not set, skipping action output", name=name, value=value)
        return False
    with Path(github_output).open("a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")
    logger.debug("Set action output", name=name, value=value)
    return True
