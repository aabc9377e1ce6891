"""Per-language declaration patterns.

Each supported file type maps to one regex recognizing the header of a
public function/method declaration, up to the opening parenthesis of its
parameter list. Adding a language is a new entry in ``PATTERNS``.
"""

from __future__ import annotations

import posixpath
import re

PATTERNS: dict[str, re.Pattern[str]] = {
    "go": re.compile(r"^(\s)*func( \(.+)\)? [A-Z]{1}[A-Za-z]*\("),
    "php": re.compile(
        r"^(\s)*public( static)? function [_A-Za-z]+\(|^(\s)*function [_A-Za-z]+\("
    ),
    "java": re.compile(r"^(\s)*public( static)?( .+)? [A-Za-z]+\("),
    "js": re.compile(
        r"^(\s)*function [A-Za-z]+\("
        r"|^(\s)*(var )?[A-Za-z._]+(\s)*=(\s)*function \("
        r"|(\s)*[A-Za-z._]+(\s)*:(\s)*function \("
    ),
    "sh": re.compile(r"^(\s)*function [A-Za-z_]+\("),
}

SUPPORTED_TYPES: set[str] = set(PATTERNS)


def pattern_for(type_tag: str) -> re.Pattern[str] | None:
    """Return the declaration pattern for *type_tag*, or None if unsupported."""
    return PATTERNS.get(type_tag)


def is_supported(type_tag: str) -> bool:
    return type_tag in PATTERNS


def type_of(path: str) -> str:
    """Lowercase extension of the last path segment.

    Empty when the name has no dot, or starts with one (dotfiles).
    """
    filename = posixpath.basename(path)
    if "." not in filename or filename.startswith("."):
        return ""
    return posixpath.splitext(filename)[1][1:].strip().lower()


def filter_declarations(pattern: re.Pattern[str], lines: list[str]) -> list[str]:
    """Keep only the lines that look like a declaration for *pattern*."""
    return [line for line in lines if pattern.search(line)]
