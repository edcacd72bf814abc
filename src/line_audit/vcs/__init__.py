"""Version-control helpers."""

from line_audit.vcs.blame import (  # noqa: F401
    BlameAttributor,
    BlameError,
    GitBlameAttributor,
    parse_blame_author,
)

__all__ = ["BlameAttributor", "BlameError", "GitBlameAttributor", "parse_blame_author"]
