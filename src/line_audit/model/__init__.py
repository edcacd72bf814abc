"""Records passed between the walker and the line strategies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineRecord:
    """One physical line of an inspected file."""

    path: str
    line_no: int   # 1-based
    line: str      # newline terminator stripped


@dataclass(frozen=True, slots=True)
class MatchReport:
    """A single report line: ``<path>:<line_no> <message>``."""

    path: str
    line_no: int
    message: str

    @classmethod
    def for_record(cls, record: LineRecord, message: str) -> "MatchReport":
        return cls(path=record.path, line_no=record.line_no, message=message)

    def __str__(self) -> str:
        return f"{self.path}:{self.line_no} {self.message}"
