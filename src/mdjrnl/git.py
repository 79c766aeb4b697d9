"""Best-effort git synchronisation of the journal root.

Each step is an independent ``git -C <root> ...`` call. A step that cannot
be spawned is fatal; a step that runs and fails is logged as a warning and
the next step still runs.
"""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Optional

from .models import ProcessLaunchError

logger = logging.getLogger(__name__)

COMMIT_PREFIX = "jrnl"


def _run_git(root: Path, step: str, *args: str) -> int:
    cmd = ["git", "-C", str(root), *args]
    logger.debug("running %s", cmd)
    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        raise ProcessLaunchError(f"failed to {step}: {e}") from e

    if result.returncode != 0:
        logger.warning("git %s failed in %s (exit %d)", step, root, result.returncode)
    return result.returncode


def commit_message(now: Optional[datetime] = None) -> str:
    """``jrnl: <local timestamp with offset>``."""
    if now is None:
        now = datetime.now().astimezone()
    return f"{COMMIT_PREFIX}: {now}"


def stage_all(root: Path) -> int:
    return _run_git(root, "stage changes", "add", ".")


def commit(root: Path, now: Optional[datetime] = None) -> int:
    return _run_git(root, "commit changes", "commit", "-m", commit_message(now))


def commit_all(root: Path, now: Optional[datetime] = None) -> tuple[int, int]:
    """Stage everything under ``root`` then commit it.

    Returns:
        Tuple of (stage exit status, commit exit status)
    """
    staged = stage_all(root)
    committed = commit(root, now)
    return staged, committed


def push(root: Path, force: bool = False) -> int:
    args = ["push", "--force"] if force else ["push"]
    return _run_git(root, "push changes", *args)
