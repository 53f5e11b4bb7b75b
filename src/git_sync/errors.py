from __future__ import annotations


class SyncError(Exception):
    exit_code = 1


class NotARepoError(SyncError):
    def __init__(self) -> None:
        super().__init__("Not inside a git repository.")


class NoRemoteError(SyncError):
    def __init__(self, remote: str) -> None:
        self.remote = remote
        super().__init__(f"No '{remote}' remote configured.")


class OperatorAbort(SyncError):
    def __init__(self) -> None:
        super().__init__("Aborting.")


class RebaseConflict(SyncError):
    def __init__(self, remote: str, branch: str, *, stashed: bool = False) -> None:
        self.remote = remote
        self.branch = branch
        self.stashed = stashed
        lines = [
            "Rebase encountered conflicts. Resolve them, then run:",
            "  git add <fixed-files> && git rebase --continue",
            "After successful rebase, re-run git-sync to push.",
        ]
        if stashed:
            lines.append("Your stashed changes are still in the stash list (git stash list).")
        super().__init__("\n".join(lines))


class StashReapplyConflict(SyncError):
    def __init__(self) -> None:
        super().__init__(
            "Conflicts occurred while applying stash. Resolve them, commit, then push manually."
        )


class CommandFailure(SyncError):
    def __init__(self, command: list[str], returncode: int, stderr: str) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"git command failed ({returncode}): {' '.join(command)}\n{stderr}")
