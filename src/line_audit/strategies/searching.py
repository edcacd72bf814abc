"""Searching strategy: first match of a user pattern, with context."""

from __future__ import annotations

import re

from line_audit.model import MatchReport

CONTEXT_CHARS = 10

# Inline global flags such as "(?i)" must stay at the very start.
_GLOBAL_FLAGS = re.compile(r"^(?:\(\?[aiLmsux]+\))+")


def wrap_pattern(pattern: str, context: int = CONTEXT_CHARS) -> re.Pattern[str]:
    """Compile *pattern* between two context windows of up to *context* chars.

    Group 1 is the text before the match, group 2 the match itself and the
    last group the text after it.  Groups inside *pattern* are nested in
    group 2.  Leading inline flags (``(?i)todo``) are hoisted in front of
    the windows.  Raises ``re.error`` for a malformed pattern.
    """
    flags = _GLOBAL_FLAGS.match(pattern)
    prefix = flags.group(0) if flags else ""
    body = pattern[len(prefix):]
    return re.compile(rf"{prefix}(.{{0,{context}}}?)({body})(.{{0,{context}}})")


class SearchingStrategy:
    """Reports the first match of a raw user pattern on each line."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self.regex = wrap_pattern(pattern)

    def check_line(self, path: str, line_no: int, line: str) -> list[MatchReport]:
        match = self.regex.search(line)
        if match is None:
            return []
        before, found = match.group(1), match.group(2)
        after = match.group(self.regex.groups)
        return [MatchReport(path, line_no, before.lstrip() + found + after.rstrip())]
