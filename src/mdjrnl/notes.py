"""Namespace to path resolution and create-if-absent note initialization."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from .models import NOTE_SUFFIX, NoteError, NoteLocation, UsageError

logger = logging.getLogger(__name__)

MIN_NAMESPACE_DEPTH = 2


def _check_segment(segment: str) -> None:
    if segment in ("", ".", ".."):
        raise UsageError(f"Invalid namespace segment: {segment!r}")
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in segment for sep in separators):
        raise UsageError(f"Namespace segment contains a path separator: {segment!r}")


def resolve_note_path(root: Path, namespace: Sequence[str]) -> NoteLocation:
    """Map a namespace to its directory and note file under ``root``.

    Every segment but the last becomes a directory; the last becomes the
    file stem. No filesystem access is performed.

    Raises:
        UsageError: If the namespace is shorter than two segments or a
            segment could escape the root.
    """
    if len(namespace) < MIN_NAMESPACE_DEPTH:
        raise UsageError(
            f"Namespace must be at least {MIN_NAMESPACE_DEPTH} deep, got {list(namespace)}"
        )
    for segment in namespace:
        _check_segment(segment)

    *parents, last = namespace
    directory = root.joinpath(*parents)
    return NoteLocation(
        namespace=tuple(namespace),
        directory=directory,
        file=directory / f"{last}{NOTE_SUFFIX}",
    )


def default_header(namespace: Sequence[str]) -> str:
    """``# a.b.c`` for namespace ``[a, b, c]``."""
    return f"# {'.'.join(namespace)}"


def ensure_note(location: NoteLocation, header: Optional[str] = None) -> bool:
    """Make sure the note file exists, seeding it with a header on creation.

    An existing file is never opened for writing, so its content is kept
    exactly as it was.

    Returns:
        True if the file was created by this call.

    Raises:
        NoteError: If the directory or file cannot be created for any reason
            other than the file already existing.
    """
    try:
        location.directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise NoteError(f"Couldn't create directory {location.directory}: {e}") from e

    if header is None:
        header = default_header(location.namespace)

    try:
        with open(location.file, "x", encoding="utf-8") as f:
            f.write(header)
    except FileExistsError:
        logger.debug("note already exists: %s", location.file)
        return False
    except OSError as e:
        raise NoteError(f"Couldn't create note {location.file}: {e}") from e

    logger.info("created note %s", location.file)
    return True
