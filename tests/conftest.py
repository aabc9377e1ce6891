"""Shared test fixtures."""

from __future__ import annotations

import pytest

from checkbreak.git import GitError


class FakeHistory:
    """In-memory stand-in for a git repository.

    ``diffs`` maps a path to its unified diff lines, ``contents`` maps
    ``(ref, path)`` to file lines. Paths listed in ``broken`` fail.
    """

    def __init__(
        self,
        diffs: dict[str, list[str]] | None = None,
        contents: dict[tuple[str, str], list[str]] | None = None,
        broken: set[str] | None = None,
    ) -> None:
        self.diffs = diffs or {}
        self.contents = contents or {}
        self.broken = broken or set()
        self.calls: list[tuple[str, ...]] = []

    def diff_file(self, start: str, end: str, path: str) -> list[str]:
        self.calls.append(("diff", start, end, path))
        if path in self.broken:
            msg = f"git diff failed: bad path {path}"
            raise GitError(msg)
        return self.diffs.get(path, [])

    def show_file(self, ref: str, path: str) -> list[str]:
        self.calls.append(("show", ref, path))
        if path in self.broken:
            msg = f"git show failed: bad path {path}"
            raise GitError(msg)
        return self.contents.get((ref, path), [])


@pytest.fixture
def make_history() -> type[FakeHistory]:
    """Build a FakeHistory: ``make_history(diffs=..., contents=..., broken=...)``."""
    return FakeHistory
