from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel

CONFIG_FILENAME = "git-sync.yaml"


class SyncConfig(BaseModel):
    primary_branch: str = "main"
    remote: str = "origin"
    include_untracked: bool = True
    stash_message_prefix: str = "git-sync auto-stash"
    log_level: str = "WARNING"
    config_path: Path | None = None


def _find_config_file(start: Path | None = None) -> Path | None:
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_config(start: Path | None = None) -> SyncConfig:
    config_path = _find_config_file(start)

    if config_path is not None:
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
        config = SyncConfig.model_validate(raw)
        config.config_path = config_path
    else:
        config = SyncConfig()

    primary_branch_env = os.environ.get("GIT_SYNC_PRIMARY_BRANCH")
    if primary_branch_env:
        config.primary_branch = primary_branch_env

    remote_env = os.environ.get("GIT_SYNC_REMOTE")
    if remote_env:
        config.remote = remote_env

    log_level_env = os.environ.get("GIT_SYNC_LOG_LEVEL")
    if log_level_env:
        config.log_level = log_level_env.upper()

    return config
