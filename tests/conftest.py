"""Shared fixtures: a throw-away source tree and a fake blame attributor."""

from __future__ import annotations

from pathlib import Path

import pytest

from line_audit.core.config import VARIANT_A


class FakeBlame:
    """Deterministic stand-in for ``git blame``; records every call."""

    def __init__(self, author: str = "Jane Doe", authors: dict | None = None):
        self.author = author
        self.authors = authors or {}
        self.calls: list[tuple[str, int]] = []

    def attribute(self, path: str, line_no: int) -> str:
        self.calls.append((path, line_no))
        return self.authors.get((path, line_no), self.author)


def write_tree(base: Path, files: dict[str, str | bytes]) -> Path:
    """Create every ``VARIANT_A`` root under *base*, then *files* in it."""
    for root in VARIANT_A.roots:
        (base / root).mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        target = base / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8", newline="")
    return base


@pytest.fixture()
def fake_blame() -> FakeBlame:
    return FakeBlame()
