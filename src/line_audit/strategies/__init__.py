"""Line strategies turn one physical line into zero or more reports.

Every strategy exposes ``check_line(path, line_no, line) -> list[MatchReport]``
and is stateless across calls apart from its own configuration.  The tree
walker holds a ``LineStrategy`` and never a concrete class.

Available strategies:
    - AnalyzingStrategy: TODO comments and over-long lines (with blame)
    - SearchingStrategy: first regex match per line, with context window
"""

from __future__ import annotations

from typing import Protocol

from line_audit.model import MatchReport


class LineStrategy(Protocol):
    """Process one line, produce zero or more reports."""

    def check_line(self, path: str, line_no: int, line: str) -> list[MatchReport]:
        """Inspect *line* (line *line_no* of *path*) and return its reports."""
        ...


# Lazy imports to avoid circular dependencies
def __getattr__(name: str):
    if name == "AnalyzingStrategy":
        from .analyzing import AnalyzingStrategy
        return AnalyzingStrategy
    if name == "SearchingStrategy":
        from .searching import SearchingStrategy
        return SearchingStrategy
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
