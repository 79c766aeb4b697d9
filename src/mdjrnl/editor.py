"""Launching the external editor on a note."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .models import ProcessLaunchError

logger = logging.getLogger(__name__)

EDITOR_OPTIONS = (":set spell", ":set wrap")


def editor_command(editor: str, root: Path, file_path: Path) -> list[str]:
    """Build the editor argv: cd into the root, open the file, enable spell and wrap."""
    args = [editor, "-c", f"cd {root}", str(file_path)]
    for option in EDITOR_OPTIONS:
        args.extend(["-c", option])
    return args


def open_in_editor(root: Path, file_path: Path, editor: str = "nvim") -> int:
    """Open ``file_path`` and block until the editor exits.

    Returns:
        The editor's exit status (not treated as an error).

    Raises:
        ProcessLaunchError: If the editor cannot be started.
    """
    args = editor_command(editor, root, file_path)
    logger.debug("running %s", args)
    try:
        result = subprocess.run(args, cwd=str(root), check=False)
    except OSError as e:
        raise ProcessLaunchError(f"Failed to open {file_path} with {editor}: {e}") from e

    if result.returncode != 0:
        logger.debug("%s exited with status %d", editor, result.returncode)
    return result.returncode
