"""Runner: walks the scan roots and feeds every line to the active strategy."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Sequence, TextIO

from line_audit.core.config import DEFAULT_CONFIG, ScanConfig
from line_audit.core.discover import PathFilter, iter_source_files
from line_audit.model import LineRecord

if TYPE_CHECKING:
    from line_audit.strategies import LineStrategy

_logger = logging.getLogger(__name__)


def _chomp(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def stream_lines(
    fs_path: Path, display_path: str, *, encoding: str = "utf-8"
) -> Iterator[LineRecord]:
    """Yield the lines of *fs_path* as 1-based ``LineRecord`` objects.

    Lines are split on ``\\n`` only; one trailing terminator is removed.
    Decoding errors surface as ``UnicodeDecodeError`` mid-stream.
    """
    with open(fs_path, encoding=encoding, newline="\n") as fh:
        for line_no, line in enumerate(fh, start=1):
            yield LineRecord(display_path, line_no, _chomp(line))


class TreeWalker:
    """Drives the scan: discovery, line streaming and report output.

    The walker only knows the ``LineStrategy`` protocol.  Each line is
    handed to the strategy and its reports are written before the next
    line is read.
    """

    def __init__(
        self,
        config: ScanConfig = DEFAULT_CONFIG,
        *,
        base: Path | None = None,
        out: TextIO | None = None,
    ):
        self.config = config
        self.base = base or Path(".")
        self.out = out
        self.path_filter = PathFilter(config)
        self.reports_written = 0

    def walk(self, roots: Sequence[str], strategy: LineStrategy) -> int:
        """Scan *roots* in order with *strategy*; return the report count."""
        config = self.config.with_overrides(roots=tuple(roots))
        for path in iter_source_files(config, base=self.base, path_filter=self.path_filter):
            self._check_file(path, strategy)
        return self.reports_written

    def _check_file(self, path: str, strategy: LineStrategy) -> None:
        out = self.out if self.out is not None else sys.stdout
        records = stream_lines(self.base / path, path, encoding=self.config.encoding)
        while True:
            # Only reading the file is guarded; strategy and output errors propagate.
            try:
                record = next(records)
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as exc:
                if self.config.strict:
                    raise
                _logger.warning("Cannot read '%s': %s, skipped", path, exc)
                return
            for report in strategy.check_line(record.path, record.line_no, record.line):
                print(report, file=out)
                self.reports_written += 1


def run_scan(
    strategy: LineStrategy,
    config: ScanConfig = DEFAULT_CONFIG,
    *,
    base: Path | None = None,
    out: TextIO | None = None,
) -> int:
    """Scan every configured root with *strategy*.

    This is the single entry point the CLI uses.  Returns the number of
    report lines written.
    """
    walker = TreeWalker(config, base=base, out=out)
    count = walker.walk(config.roots, strategy)
    _logger.debug("Scan finished: %d report(s)", count)
    return count
