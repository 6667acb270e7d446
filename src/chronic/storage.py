"""Shared YAML I/O and git helpers for the chronic store."""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Any

import yaml

from chronic.errors import StoreError

log = logging.getLogger(__name__)


def git_commit(repo: Path, paths: list[Path], message: str) -> None:
    """Stage additions and deletions under paths and commit them.

    Only commits to a repo rooted at repo itself, never to an enclosing
    one; paths outside it are left alone. No-op when repo is not a git repo.
    """
    if not (repo / ".git").is_dir():
        return
    rels = [str(p.relative_to(repo)) for p in paths if p.is_relative_to(repo)]
    if not rels:
        return
    subprocess.run(
        ["git", "add", "-A", "--", *rels],
        cwd=repo,
        capture_output=True,
    )
    subprocess.run(
        ["git", "commit", "-m", message, "--", *rels],
        cwd=repo,
        capture_output=True,
    )


def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)


def write_yaml(filepath: Path, data: Any) -> None:
    """Atomic write (temp file + rename); replaces any existing file."""
    content = dump_yaml(data)
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=filepath.parent, suffix=".tmp")
        try:
            os.write(fd, content.encode())
        finally:
            os.close(fd)
        os.replace(tmp, filepath)
    except OSError as e:
        raise StoreError(f"cannot write {filepath}: {e}") from e


def read_yaml(filepath: Path) -> Any:
    try:
        text = filepath.read_text()
    except FileNotFoundError as e:
        raise StoreError(f"{filepath} does not exist") from e
    except OSError as e:
        raise StoreError(f"cannot read {filepath}: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise StoreError(f"{filepath} is not valid YAML: {e}") from e


def read_yaml_list(filepath: Path) -> list[dict[str, Any]]:
    """Read a YAML document that must be a list of mappings."""
    data = read_yaml(filepath)
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise StoreError(f"{filepath} is not a list of records")
    return data
