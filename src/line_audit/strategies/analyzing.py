"""Analyzing strategy: TODO comments and lines that are too long."""

from __future__ import annotations

import logging
import re

from line_audit.core.config import DEFAULT_CONFIG, ScanConfig
from line_audit.model import LineRecord, MatchReport
from line_audit.vcs.blame import BlameAttributor, BlameError, GitBlameAttributor

_logger = logging.getLogger(__name__)

_TODO = re.compile(r"todo", re.IGNORECASE)

UNKNOWN_AUTHOR = "unknown"


def extract_todo(
    line: str,
    start: re.Pattern[str] = DEFAULT_CONFIG.todo_start,
    end: re.Pattern[str] = DEFAULT_CONFIG.todo_end,
) -> str:
    """Return the TODO message of *line* with its comment markers removed.

    ``// TODO - fix this`` and ``/* TODO: fix this */`` both give
    ``fix this``.  Each marker is removed at most once, so running this on
    an already-extracted message is a no-op.
    """
    text = start.sub("", line.strip(), count=1)
    text = end.sub("", text.rstrip(), count=1)
    return text.strip()


class AnalyzingStrategy:
    """Reports TODO comments and over-long lines.

    Long lines are attributed through a ``BlameAttributor``, which is only
    called when a line is actually too long.  Authors matching
    ``config.ignored_authors`` get no long-line report; their TODO lines
    are still reported.
    """

    def __init__(
        self,
        config: ScanConfig = DEFAULT_CONFIG,
        blame: BlameAttributor | None = None,
    ):
        self.config = config
        self.blame = blame or GitBlameAttributor()

    def check_line(self, path: str, line_no: int, line: str) -> list[MatchReport]:
        record = LineRecord(path, line_no, line)
        reports: list[MatchReport] = []

        if _TODO.search(line):
            todo = extract_todo(line, self.config.todo_start, self.config.todo_end)
            reports.append(MatchReport.for_record(record, f"TODO - {todo}"))

        length = len(line)
        if length > self.config.max_line_length:
            author = self._author_of(record)
            if not self._is_ignored(author):
                reports.append(
                    MatchReport.for_record(
                        record, f"is too long ({length} chars), blame {author}"
                    )
                )

        return reports

    def _author_of(self, record: LineRecord) -> str:
        try:
            return self.blame.attribute(record.path, record.line_no)
        except BlameError as exc:
            if self.config.strict:
                raise
            _logger.warning(
                "Blame failed for %s:%d: %s", record.path, record.line_no, exc
            )
            return UNKNOWN_AUTHOR

    def _is_ignored(self, author: str) -> bool:
        return any(p.search(author) for p in self.config.ignored_authors)
