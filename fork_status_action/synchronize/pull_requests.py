"""Contains logic for synchronizing the fork status pull request."""

import re

import structlog
from structlog.contextvars import bound_contextvars

from fork_status_action.github.adapter import GitHubKitAdapter
from fork_status_action.github.exceptions import PullRequestAlreadyExistsError
from fork_status_action.schemas.fork_status import ForkStatus
from fork_status_action.synchronize.models import SyncOutcome
from fork_status_action.synchronize.results import BroadcastResult, SyncPullRequestResult
from fork_status_action.utils.constants import BLOCKED_BY_COMMENT, BLOCKED_BY_MESSAGE, BLOCKED_BY_PATTERN

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def sync_pull_request_is_open(github_adapter: GitHubKitAdapter, branch_name: str, target_branch: str) -> bool:
    """Check if an open pull request from the sync branch into the target branch exists."""
    pull_requests = await github_adapter.list_pull_requests(
        state="open",
        head=f"{github_adapter.owner}:{branch_name}",
        base=target_branch,
    )
    logger.debug(
        "Open pull requests from sync branch",
        branch=branch_name,
        target_branch=target_branch,
        pull_request_numbers=[pr.number for pr in pull_requests],
    )
    return len(pull_requests) > 0


async def reconcile_sync_pull_request(
    github_adapter: GitHubKitAdapter,
    fork_status: ForkStatus,
    branch_name: str,
    file_path: str,
    target_branch: str,
    commit_message: str,
) -> SyncPullRequestResult:
    """Ensure a single branch, marker file and pull request exist for the fork status.

    The marker file already being present on the target branch, or an open
    pull request already riding on the sync branch, are both no-ops. A stale
    sync branch with no open pull request is deleted and recreated from the
    tip of the target branch before the marker file is committed.
    """
    with bound_contextvars(branch=branch_name, target_branch=target_branch, file_path=file_path):
        logger.info("Checking if marker file exists on target branch")
        if await github_adapter.file_exists(file_path, ref=target_branch):
            logger.info("Marker file already exists on target branch, no pull request will be created")
            return SyncPullRequestResult(SyncOutcome.ALREADY_SYNCED)

        try:
            if await github_adapter.branch_exists(branch_name):
                if await sync_pull_request_is_open(github_adapter, branch_name, target_branch):
                    logger.info("An open pull request from the sync branch already exists, no further action taken")
                    return SyncPullRequestResult(SyncOutcome.ALREADY_PENDING)
                logger.info("No open pull request from the sync branch, deleting and recreating it from the target branch")
                await github_adapter.delete_branch(branch_name)
            else:
                logger.info("Sync branch does not exist, creating it from the target branch")
            await github_adapter.create_branch(branch_name, target_branch)

            await github_adapter.commit_files_to_branch(
                branch_name,
                [(file_path, fork_status.to_json())],
                commit_message,
            )

            new_pr = await github_adapter.create_pull_request(
                title=commit_message,
                head=branch_name,
                base=target_branch,
                body=commit_message,
            )
        except PullRequestAlreadyExistsError as exc:
            logger.warning("Pull request already exists, please review and merge the existing one", error=str(exc))
            return SyncPullRequestResult(SyncOutcome.ALREADY_EXISTS)

        logger.info("Created fork status pull request", pr_number=new_pr.number, pr_url=new_pr.html_url)
        return SyncPullRequestResult(SyncOutcome.CREATED, url=new_pr.html_url, number=new_pr.number)


async def render_blocked_by_body(body: str | None, blocking_pull_request_number: int) -> str:
    """Return a pull request body carrying exactly one up-to-date block annotation.

    The first existing annotation is rewritten in place and any further
    annotations are removed. Bodies without an annotation get one appended.
    """
    new_block_message = BLOCKED_BY_MESSAGE.format(number=blocking_pull_request_number)
    if not body:
        return new_block_message

    if BLOCKED_BY_PATTERN.search(body) is None:
        return f"{body}\n\n{new_block_message}"

    replaced = False

    def _replace(match: re.Match[str]) -> str:
        nonlocal replaced
        if replaced:
            return ""
        replaced = True
        return new_block_message

    return BLOCKED_BY_PATTERN.sub(_replace, body)


async def broadcast_block_annotation(github_adapter: GitHubKitAdapter, blocking_pull_request_number: int) -> BroadcastResult:
    """Mark every other open pull request as blocked by the fork status pull request.

    The sweep stops at the first failure; pull requests updated before the
    failure keep their new body.
    """
    result = BroadcastResult(blocking_pull_request_number=blocking_pull_request_number)
    new_block_message = BLOCKED_BY_MESSAGE.format(number=blocking_pull_request_number)
    open_pull_requests = await github_adapter.list_pull_requests(state="open")
    logger.info("Annotating open pull requests", blocking_pr_number=blocking_pull_request_number, open_pr_count=len(open_pull_requests))

    for pr in open_pull_requests:
        if pr.number == blocking_pull_request_number:
            continue
        with bound_contextvars(pr_number=pr.number):
            new_body = await render_blocked_by_body(pr.body, blocking_pull_request_number)
            logger.debug("Updating pull request body", old_body=pr.body, new_body=new_body)
            await github_adapter.update_pull_request(pr.number, body=new_body)
            await github_adapter.create_issue_comment(pr.number, BLOCKED_BY_COMMENT.format(message=new_block_message))
            logger.info("Pull request marked as blocked", blocked_by=blocking_pull_request_number)
        result.updated_pull_request_numbers.append(pr.number)
    return result
