"""Shared constants used across the application."""

# This file is intended to hold shared constants.

import re

# Action Input Defaults
# ---------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub API URL (override for GitHub Enterprise Server)."""

DEFAULT_UPSTREAM_FILE_PATH = ".github/UPSTREAM"
"""Default path of the marker file recording the upstream parent repository."""

DEFAULT_NEW_BRANCH_NAME = "update-fork-status2"
"""Default name of the branch carrying the marker file commit."""

DEFAULT_TARGET_BRANCH = "main"
"""Default base branch for the fork status pull request."""

DEFAULT_BOT_COMMIT_MESSAGE = "Automatically add UPSTREAM file"
"""Default commit message, also used as pull request title and body."""

# Block Annotation Constants
# --------------------------

BLOCKED_BY_PATTERN = re.compile(r"Blocked by\s*#\s*\d+", re.IGNORECASE)
"""Pattern to match existing block annotations in pull request bodies (e.g. Blocked by #12)."""

BLOCKED_BY_MESSAGE = "Blocked by #{number}"
"""Block annotation template. Use .format(number=N) to fill in the blocking pull request."""

BLOCKED_BY_COMMENT = "This PR is now {message}."
"""Comment posted on a pull request after its block annotation changes."""

# Action Output Names
# -------------------

OUTPUT_PR_URL = "pr-url"
"""Name of the action output holding the created pull request URL."""

OUTPUT_PR_NUMBER = "pr-number"
"""Name of the action output holding the created pull request number."""
