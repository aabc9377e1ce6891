"""Configured path exclusions."""

from __future__ import annotations

from collections.abc import Iterable

from checkbreak.engine._types import File


def is_excluded(name: str, prefixes: Iterable[str]) -> bool:
    """Literal string-prefix test: ``lib`` excludes ``libfoo/x`` too."""
    return any(name.startswith(p) for p in prefixes)


def filter_excluded(files: list[File], prefixes: Iterable[str] | None) -> list[File]:
    """Drop the files whose name starts with one of *prefixes*."""
    excluded = list(prefixes or [])
    if not excluded:
        return files
    return [f for f in files if not is_excluded(f.name, excluded)]
