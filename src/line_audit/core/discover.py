"""File discovery: depth-first walk of the scan roots with name filters."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from line_audit.core.config import ScanConfig

_logger = logging.getLogger(__name__)


class PathFilter:
    """Name-based predicates for directories and files.

    Both checks look at the bare entry name only, never the full path, and
    are evaluated independently at their own tree level.
    """

    def __init__(self, config: ScanConfig):
        self.ignored_dirs = config.ignored_dirs
        self.file_patterns = config.file_patterns

    def should_descend(self, dir_name: str) -> bool:
        return not any(p.search(dir_name) for p in self.ignored_dirs)

    def should_inspect(self, file_name: str) -> bool:
        return any(p.search(file_name) for p in self.file_patterns)


def iter_source_files(
    config: ScanConfig,
    *,
    base: Path | None = None,
    path_filter: PathFilter | None = None,
) -> Iterator[str]:
    """Yield ``root/sub/name`` paths of every file to inspect.

    Roots are visited in configured order, each depth-first.  Entries come
    back in whatever order ``os.listdir`` returns them.  Paths are relative
    to *base* (default: the working directory).
    """
    base = base or Path(".")
    path_filter = path_filter or PathFilter(config)
    for root in config.roots:
        yield from _walk_dir(root, base, path_filter, strict=config.strict)


def _walk_dir(
    dir_path: str, base: Path, path_filter: PathFilter, *, strict: bool
) -> Iterator[str]:
    try:
        names = os.listdir(base / dir_path)
    except OSError as exc:
        if strict:
            raise
        _logger.warning("Cannot list directory '%s': %s, skipped", dir_path, exc)
        return

    for name in names:
        entry = f"{dir_path}/{name}"
        if (base / entry).is_dir():
            if path_filter.should_descend(name):
                yield from _walk_dir(entry, base, path_filter, strict=strict)
            else:
                _logger.debug("Not descending into '%s'", entry)
        elif path_filter.should_inspect(name):
            yield entry
