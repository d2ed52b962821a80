"""Orchestrates the fork status synchronization workflow."""

import time

import structlog

from fork_status_action.configuration.models import ActionConfig
from fork_status_action.github.adapter import GitHubKitAdapter
from fork_status_action.synchronize.fork_status import detect_fork_status
from fork_status_action.synchronize.models import SyncOutcome
from fork_status_action.synchronize.pull_requests import broadcast_block_annotation, reconcile_sync_pull_request
from fork_status_action.synchronize.results import RunResult, SyncPullRequestResult
from fork_status_action.utils.actions import set_action_output
from fork_status_action.utils.constants import OUTPUT_PR_NUMBER, OUTPUT_PR_URL

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def report_sync_outcome(sync_result: SyncPullRequestResult) -> None:
    """Log a human readable summary of the pull request reconciliation."""
    if sync_result.outcome == SyncOutcome.CREATED:
        logger.info("PR created", pr_url=sync_result.url, pr_number=sync_result.number)
    elif sync_result.outcome == SyncOutcome.ALREADY_SYNCED:
        logger.info("Marker file already exists in the target branch. No PR created.")
    elif sync_result.outcome == SyncOutcome.ALREADY_PENDING:
        logger.info("An open fork status PR already exists. Please review and merge the existing one.")
    elif sync_result.outcome == SyncOutcome.ALREADY_EXISTS:
        logger.info("PR already exists. Please review and merge the existing one.")


async def run_fork_status_workflow(config: ActionConfig, github_adapter: GitHubKitAdapter | None = None) -> RunResult:
    """Run the fork status workflow: detect, reconcile the status pull request, then broadcast the block annotation."""
    if github_adapter is None:
        github_adapter = await GitHubKitAdapter.create(
            repo=config.repo,
            github_token=config.github_token,
            github_api_url=config.github_api_url,
        )

    start_time = time.time()
    logger.info("Fork status workflow started", repository=github_adapter.full_name)

    fork_status = await detect_fork_status(github_adapter, config.excluded_repos)
    result = RunResult(fork_status=fork_status)
    if fork_status.is_empty:
        logger.info("Repository is not a fork or is excluded. No PR created.", repository=github_adapter.full_name)
        return result

    logger.info("Creating fork status PR", repository=github_adapter.full_name, fork_status=fork_status.to_json())
    sync_result = await reconcile_sync_pull_request(
        github_adapter,
        fork_status,
        branch_name=config.new_branch_name,
        file_path=config.upstream_file_path,
        target_branch=config.target_branch,
        commit_message=config.bot_commit_message,
    )
    result.sync_result = sync_result
    await report_sync_outcome(sync_result)

    if sync_result.created and sync_result.number is not None:
        set_action_output(OUTPUT_PR_URL, sync_result.url or "", config.github_output)
        set_action_output(OUTPUT_PR_NUMBER, str(sync_result.number), config.github_output)
        result.broadcast_result = await broadcast_block_annotation(github_adapter, sync_result.number)

    end_time = time.time()
    logger.info(
        "Fork status workflow finished",
        repository=github_adapter.full_name,
        outcome=sync_result.outcome.value,
        duration=round(end_time - start_time, 2),
    )
    return result
