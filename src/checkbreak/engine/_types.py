"""Shared types for the check-break engine."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from checkbreak.languages import is_supported, pattern_for

STATUS_ADDED = "A"
STATUS_MODIFIED = "M"
STATUS_DELETED = "D"


@dataclass(frozen=True)
class Diff:
    """Declaration lines of a file, split into removed and added."""

    removed: tuple[str, ...] = ()
    added: tuple[str, ...] = ()


@dataclass(frozen=True)
class File:
    """A changed file between the two references."""

    name: str
    status: str
    type_tag: str = ""
    diff: Diff = field(default_factory=Diff)

    @property
    def pattern(self) -> re.Pattern[str] | None:
        return pattern_for(self.type_tag)

    @property
    def is_deleted(self) -> bool:
        return self.status == STATUS_DELETED

    @property
    def can_have_break(self) -> bool:
        """New files cannot regress compatibility."""
        return self.status != STATUS_ADDED

    @property
    def is_supported(self) -> bool:
        return is_supported(self.type_tag)


@dataclass(frozen=True)
class Method:
    """A potential compatibility break on a public method."""

    before: str
    after: str
    common_factor: str
    explanation: str


class SourceHistory(Protocol):
    """Retrieval of file content between references.

    Both methods raise :class:`checkbreak.git.GitError` on failure.
    """

    def diff_file(self, start: str, end: str, path: str) -> list[str]: ...

    def show_file(self, ref: str, path: str) -> list[str]: ...
