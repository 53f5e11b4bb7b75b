import logging

import typer
import yaml
from pydantic import ValidationError

from git_sync.config.settings import load_config
from git_sync.errors import OperatorAbort, RebaseConflict, StashReapplyConflict, SyncError
from git_sync.interviewer.console import ConsoleInterviewer
from git_sync.sync import run_sync

app = typer.Typer(
    name="git-sync",
    help="Stash, fetch, rebase onto the remote branch and push, with confirmation prompts.",
    add_completion=False,
)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _format_error(error: SyncError) -> str:
    # These already read as complete instructions for the operator.
    if isinstance(error, (OperatorAbort, RebaseConflict, StashReapplyConflict)):
        return str(error)
    return f"Error: {error}"


@app.command()
def sync() -> None:
    """Sync the current branch with its remote counterpart and push it."""
    try:
        config = load_config()
    except (ValidationError, yaml.YAMLError, OSError) as e:
        typer.echo(f"Error: could not load git-sync configuration: {e}", err=True)
        raise typer.Exit(code=1)

    _configure_logging(config.log_level)

    try:
        run_sync(config, ConsoleInterviewer())
    except SyncError as e:
        typer.echo(_format_error(e), err=True)
        raise typer.Exit(code=e.exit_code)


if __name__ == "__main__":
    app()
