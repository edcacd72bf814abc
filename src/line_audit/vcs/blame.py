"""Line attribution via ``git blame``.

The analyzing strategy only needs one capability from version control:
"who last touched line N of this file".  ``BlameAttributor`` is that
capability; ``GitBlameAttributor`` implements it by scraping the default
``git blame`` output, e.g.::

    ^1f2e3d4 (Jane Doe   2021-03-04 10:11:12 +0000 42)     return x;
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)

# First "(<author> YYYY-MM-DD" annotation; git pads the author column.
_PERSON_PATTERN = re.compile(r"\((.+?)\s+\d{4}-\d{2}-\d{2}")


class BlameError(RuntimeError):
    """Raised when the author of a line cannot be determined."""


class BlameAttributor(Protocol):
    """Anything that can name the author of a single line."""

    def attribute(self, path: str, line_no: int) -> str:
        """Return the author of line *line_no* (1-based) of *path*."""
        ...


def parse_blame_author(output: str) -> str:
    """Extract the author name from ``git blame`` output.

    Raises ``BlameError`` if no ``(<author> YYYY-MM-DD`` annotation exists.
    """
    match = _PERSON_PATTERN.search(output)
    if match is None:
        raise BlameError(f"No author annotation in blame output: {output.strip()!r}")
    return match.group(1).strip()


class GitBlameAttributor:
    """Runs ``git blame -L <n>,+1 -- <path>`` once per call, never caching."""

    def __init__(
        self,
        cwd: Path | None = None,
        *,
        git: str = "git",
        timeout: float | None = None,
    ):
        self.cwd = cwd
        self.git = git
        self.timeout = timeout

    def _run_git(self, *args: str) -> str:
        cmd = [self.git, *args]
        _logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=str(self.cwd) if self.cwd is not None else None,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise BlameError(f"git executable not found: {self.git}") from exc
        except subprocess.TimeoutExpired as exc:
            raise BlameError(f"git blame timed out after {self.timeout}s") from exc
        except OSError as exc:
            raise BlameError(f"Cannot run {self.git}: {exc}") from exc
        if result.returncode != 0:
            raise BlameError(f"Git command failed: {result.stderr.strip()}")
        return result.stdout

    def attribute(self, path: str, line_no: int) -> str:
        output = self._run_git("blame", "-L", f"{line_no},+1", "--", path)
        return parse_blame_author(output)
