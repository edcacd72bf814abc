"""Scan configuration dataclass."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass


def _compile_all(*patterns: str, flags: int = 0) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, flags) for p in patterns)


# Searched against the bare directory name, so any dot excludes it.
_DEFAULT_IGNORED_DIRS = _compile_all(r"\.", r"\.\.", r"build")

_TODO_END = re.compile(r"\*/$")


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    Passed explicitly to ``PathFilter`` and the tree walker; the two
    historical layouts are expressed as ``VARIANT_A`` and ``VARIANT_B``.
    Only ``VARIANT_A`` ignores an author out of the box.
    """

    roots: tuple[str, ...]
    file_patterns: tuple[re.Pattern[str], ...]
    todo_start: re.Pattern[str]
    ignored_dirs: tuple[re.Pattern[str], ...] = _DEFAULT_IGNORED_DIRS
    todo_end: re.Pattern[str] = _TODO_END
    max_line_length: int = 79
    ignored_authors: tuple[re.Pattern[str], ...] = ()
    encoding: str = "utf-8"
    strict: bool = False  # fail-fast on traversal / blame errors

    def with_overrides(self, **changes) -> "ScanConfig":
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)

    def with_ignored_authors(self, *patterns: str) -> "ScanConfig":
        """Return a copy whose ignore list also contains *patterns*."""
        return self.with_overrides(
            ignored_authors=self.ignored_authors + _compile_all(*patterns)
        )


VARIANT_A = ScanConfig(
    roots=("devices", "lib", "threads", "userprog"),
    file_patterns=_compile_all(r"\.c$", r"\.h$", r"^DESIGNDOC$"),
    todo_start=re.compile(r"(//|/\*)\s*TODO\s*[-:]\s*", re.IGNORECASE),
    ignored_authors=_compile_all(r"Mark Rutland"),
)

VARIANT_B = ScanConfig(
    roots=("devices", "lib", "threads"),
    file_patterns=_compile_all(r"\.c$", r"\.h$"),
    todo_start=re.compile(r"(//|/\*)\s*TODO\s*-\s*", re.IGNORECASE),
)

DEFAULT_CONFIG = VARIANT_A
