"""mdjrnl - dated and namespaced Markdown notes, opened in an editor and kept in git."""

__version__ = "0.3.0"
