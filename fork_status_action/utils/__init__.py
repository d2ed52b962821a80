"""Utility modules for shared functionality."""

from .constants import (
    BLOCKED_BY_COMMENT,
    BLOCKED_BY_MESSAGE,
    BLOCKED_BY_PATTERN,
    DEFAULT_BOT_COMMIT_MESSAGE,
    DEFAULT_NEW_BRANCH_NAME,
    DEFAULT_TARGET_BRANCH,
    DEFAULT_UPSTREAM_FILE_PATH,
)

__all__ = [
    "BLOCKED_BY_PATTERN",
    "BLOCKED_BY_MESSAGE",
    "BLOCKED_BY_COMMENT",
    "DEFAULT_UPSTREAM_FILE_PATH",
    "DEFAULT_NEW_BRANCH_NAME",
    "DEFAULT_TARGET_BRANCH",
    "DEFAULT_BOT_COMMIT_MESSAGE",
]
