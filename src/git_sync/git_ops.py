from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from git_sync.errors import CommandFailure

logger = logging.getLogger(__name__)


def run_git(*args: str, cwd: Path) -> str:
    cmd = ["git", *args]
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    result = subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise CommandFailure(cmd, result.returncode, result.stderr.strip())
    return result.stdout.strip()


def is_git_repo(path: Path) -> bool:
    try:
        return run_git("rev-parse", "--is-inside-work-tree", cwd=path) == "true"
    except (CommandFailure, FileNotFoundError, NotADirectoryError):
        return False


def current_branch(*, cwd: Path) -> str:
    return run_git("rev-parse", "--abbrev-ref", "HEAD", cwd=cwd)


def remote_url(remote: str, *, cwd: Path) -> str:
    return run_git("remote", "get-url", remote, cwd=cwd)


def has_remote(remote: str, *, cwd: Path) -> bool:
    try:
        remote_url(remote, cwd=cwd)
        return True
    except CommandFailure:
        return False


def status_short(*, cwd: Path) -> str:
    return run_git("status", "--short", "--branch", cwd=cwd)


def status_porcelain(*, cwd: Path) -> str:
    return run_git("status", "--porcelain", cwd=cwd)


def fetch(remote: str, *, cwd: Path) -> None:
    run_git("fetch", remote, cwd=cwd)


def rebase(upstream: str, *, cwd: Path) -> None:
    run_git("rebase", upstream, cwd=cwd)


def stash_ref(*, cwd: Path) -> str:
    try:
        return run_git("rev-parse", "-q", "--verify", "refs/stash", cwd=cwd)
    except CommandFailure:
        return ""


def stash_push(message: str, *, include_untracked: bool = True, cwd: Path) -> bool:
    """Stash local changes; return False when git found nothing to save."""
    before = stash_ref(cwd=cwd)
    args = ["stash", "push"]
    if include_untracked:
        args.append("-u")
    args.extend(["-m", message])
    run_git(*args, cwd=cwd)
    return stash_ref(cwd=cwd) != before


def stash_pop(*, cwd: Path) -> None:
    run_git("stash", "pop", cwd=cwd)


def push(remote: str, branch: str, *, set_upstream: bool = True, cwd: Path) -> None:
    args = ["push"]
    if set_upstream:
        args.append("-u")
    args.extend([remote, branch])
    run_git(*args, cwd=cwd)
