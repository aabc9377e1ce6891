"""Changed-file extraction: status lines → File records with their Diff."""

from __future__ import annotations

import logging
from dataclasses import replace

from checkbreak.engine._types import STATUS_DELETED, Diff, File, SourceHistory
from checkbreak.git import GitError
from checkbreak.languages import filter_declarations, pattern_for, type_of

logger = logging.getLogger(__name__)


def parse_status_line(line: str) -> tuple[str, str]:
    """Split a ``<status> <path>`` line into (status, path).

    Git separates fields with tabs, so paths may contain spaces. A rename is
    seen as the deletion of its old path.
    """
    if "\t" in line:
        fields = line.rstrip("\n").split("\t")
    else:
        fields = line.split(None, 1)
    if len(fields) < 2:  # noqa: PLR2004
        msg = f"Malformed changed-file line: {line!r}"
        raise ValueError(msg)
    status, name = fields[0], fields[1]
    if status.startswith("R"):
        status = STATUS_DELETED
    return status, name


def _strip_markers(lines: list[str]) -> tuple[list[str], list[str]]:
    """Split unified diff lines into (removed, added), markers stripped."""
    removed: list[str] = []
    added: list[str] = []
    for line in lines:
        if line.startswith("-"):
            removed.append(line[1:].strip())
        elif line.startswith("+"):
            added.append(line[1:].strip())
    return removed, added


def extract_diff(
    name: str,
    status: str,
    type_tag: str,
    start: str,
    end: str,
    history: SourceHistory,
) -> Diff:
    """Retrieve the declaration lines removed and added in a file.

    Retrieval failures degrade to an empty Diff.
    """
    pattern = pattern_for(type_tag)
    if pattern is None:
        return Diff()

    try:
        if status == STATUS_DELETED:
            removed = [line.strip() for line in history.show_file(start, name)]
            added: list[str] = []
        else:
            removed, added = _strip_markers(history.diff_file(start, end, name))
    except GitError as exc:
        logger.warning("Cannot read changes of %s: %s", name, exc)
        return Diff()

    return Diff(
        removed=tuple(filter_declarations(pattern, removed)),
        added=tuple(filter_declarations(pattern, added)),
    )


def extract_file(line: str, start: str, end: str, history: SourceHistory) -> File:
    """Build the File record of one changed-file line."""
    status, name = parse_status_line(line)
    f = File(name=name, status=status, type_tag=type_of(name))
    return _with_diff(f, start, end, history)


def _with_diff(f: File, start: str, end: str, history: SourceHistory) -> File:
    return replace(f, diff=extract_diff(f.name, f.status, f.type_tag, start, end, history))


def extract_files(
    lines: list[str],
    start: str,
    end: str,
    history: SourceHistory,
) -> tuple[list[File], list[File]]:
    """Build File records and split them into (supported, ignored).

    Added files are dropped: they cannot break anything.
    """
    supported: list[File] = []
    ignored: list[File] = []

    for line in lines:
        status, name = parse_status_line(line)
        f = File(name=name, status=status, type_tag=type_of(name))
        if not f.can_have_break:
            continue
        f = _with_diff(f, start, end, history)
        if f.is_supported:
            supported.append(f)
        else:
            ignored.append(f)

    return supported, ignored
