"""Bring the current branch up to date with its remote counterpart and push it.

The sequence is linear and stops at the first failure. Nothing is rolled
back: a rebase left mid-conflict or a stash that failed to reapply stays
for the operator to resolve before running git-sync again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from git_sync import git_ops
from git_sync.config.settings import SyncConfig
from git_sync.errors import (
    CommandFailure,
    NoRemoteError,
    NotARepoError,
    OperatorAbort,
    RebaseConflict,
    StashReapplyConflict,
)
from git_sync.interviewer.base import Interviewer
from git_sync.interviewer.models import Answer, AnswerValue, Question, QuestionType

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    branch: str
    remote: str
    stashed: bool = False
    stash_message: str = ""


def stash_message(prefix: str, now: datetime | None = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return f"{prefix} {stamp}"


def _confirm_branch(branch: str, config: SyncConfig, interviewer: Interviewer) -> None:
    if branch == config.primary_branch:
        return
    interviewer.inform(
        f"Warning: You are on branch '{branch}', not '{config.primary_branch}'.",
        stage="warning",
    )
    answer = interviewer.ask(
        Question(
            text="Continue on this branch?",
            type=QuestionType.CONFIRMATION,
            stage="branch",
            default=Answer(value=AnswerValue.NO),
        )
    )
    if not answer.is_yes():
        raise OperatorAbort()


def _maybe_stash(config: SyncConfig, interviewer: Interviewer, *, cwd: Path) -> str:
    """Offer to stash uncommitted changes; return the stash message, or "" if none was made."""
    interviewer.inform("== Git status before sync ==")
    interviewer.inform(git_ops.status_short(cwd=cwd))

    if not git_ops.status_porcelain(cwd=cwd):
        return ""

    interviewer.inform("You have uncommitted changes.")
    answer = interviewer.ask(
        Question(
            text="Stash changes before rebasing?",
            type=QuestionType.YES_NO,
            stage="stash",
            default=Answer(value=AnswerValue.YES),
        )
    )
    if not answer.is_yes():
        logger.info("Operator declined stash; rebasing with a dirty working tree")
        return ""

    message = stash_message(config.stash_message_prefix)
    created = git_ops.stash_push(message, include_untracked=config.include_untracked, cwd=cwd)
    if not created:
        interviewer.inform("No local changes to save; nothing was stashed.")
        return ""
    logger.info("Created stash %r", message)
    return message


def run_sync(
    config: SyncConfig,
    interviewer: Interviewer,
    *,
    cwd: Path | None = None,
) -> SyncResult:
    cwd = cwd or Path.cwd()
    remote = config.remote

    if not git_ops.is_git_repo(cwd):
        raise NotARepoError()

    branch = git_ops.current_branch(cwd=cwd)
    logger.info("Current branch: %s", branch)
    _confirm_branch(branch, config, interviewer)

    if not git_ops.has_remote(remote, cwd=cwd):
        raise NoRemoteError(remote)

    message = _maybe_stash(config, interviewer, cwd=cwd)
    result = SyncResult(branch=branch, remote=remote, stashed=bool(message), stash_message=message)

    interviewer.inform(f"Fetching from {remote}...")
    git_ops.fetch(remote, cwd=cwd)

    upstream = f"{remote}/{branch}"
    interviewer.inform(f"Rebasing {branch} onto {upstream} ...")
    try:
        git_ops.rebase(upstream, cwd=cwd)
    except CommandFailure as e:
        logger.info("Rebase onto %s failed: %s", upstream, e.stderr)
        raise RebaseConflict(remote, branch, stashed=result.stashed) from e

    if result.stashed:
        interviewer.inform("Re-applying stashed changes...")
        try:
            git_ops.stash_pop(cwd=cwd)
        except CommandFailure as e:
            logger.info("Stash pop failed: %s", e.stderr)
            raise StashReapplyConflict() from e

    interviewer.inform(f"Pushing to {upstream} ...")
    git_ops.push(remote, branch, cwd=cwd)

    interviewer.inform(f"Done. Your branch is up to date with {upstream}.")
    return result
