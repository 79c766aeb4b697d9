"""Journal engine - resolves, initializes and opens notes for one profile."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from . import dates, editor, git
from .config import ProfileConfig
from .models import NoteLocation
from .notes import ensure_note, resolve_note_path

logger = logging.getLogger(__name__)


class JournalEngine:
    """Operations on the journal rooted at a profile's ``root``.

    The profile is fixed for the engine's lifetime; every operation reads
    the root and editor from it rather than from global state.
    """

    def __init__(self, profile: ProfileConfig):
        self.profile = profile
        self.root: Path = profile.root()

    # ========== Notes ==========

    def resolve(self, namespace: Sequence[str]) -> NoteLocation:
        """Resolve a namespace to its location under the root (no I/O)."""
        return resolve_note_path(self.root, namespace)

    def ensure(self, namespace: Sequence[str], header: Optional[str] = None) -> NoteLocation:
        """Resolve a namespace and create its note if absent."""
        location = self.resolve(namespace)
        ensure_note(location, header)
        return location

    def open_namespace(self, namespace: Sequence[str], header: Optional[str] = None) -> NoteLocation:
        """Ensure the note exists, then block in the editor until it exits."""
        location = self.ensure(namespace, header)
        editor.open_in_editor(self.root, location.file, self.profile.editor())
        return location

    def open_date(self, year: int, month: int, day: int) -> NoteLocation:
        """Open the note for a calendar date, headed with the written-out date.

        Raises:
            UsageError: If the date does not exist (nothing is created).
        """
        namespace, header = dates.for_date(year, month, day)
        return self.open_namespace(namespace, header)

    def open_today(self, today: Optional[date] = None) -> NoteLocation:
        namespace, header = dates.for_today(today)
        return self.open_namespace(namespace, header)

    # ========== Git ==========

    def commit(self) -> None:
        logger.info("committing %s", self.root)
        git.commit_all(self.root)

    def push(self, force: bool = False) -> None:
        logger.info("pushing %s%s", self.root, " (force)" if force else "")
        git.push(self.root, force=force)
