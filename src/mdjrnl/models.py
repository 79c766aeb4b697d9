"""Data models and error types for journal notes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


NOTE_SUFFIX = ".md"


class JournalError(Exception):
    """Base exception for journal operations."""
    pass


class ConfigError(JournalError):
    """Raised when configuration cannot be found, parsed or resolved."""
    pass


class UsageError(JournalError):
    """Raised when the caller asks for something that cannot be done."""
    pass


class NoteError(JournalError):
    """Raised when a note file or its directory cannot be created."""
    pass


class ProcessLaunchError(JournalError):
    """Raised when the editor or git cannot be spawned."""
    pass


# Ordered path segments; the last one names the note file.
Namespace = list[str]


@dataclass(frozen=True)
class NoteLocation:
    """Where a namespace lives on disk."""
    namespace: tuple[str, ...]
    directory: Path
    file: Path
