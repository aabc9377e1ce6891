"""Break classification — pairs removed declarations with added ones."""

from __future__ import annotations

import logging

from checkbreak.engine._types import File, Method
from checkbreak.engine.differ import explain_changes

logger = logging.getLogger(__name__)


def _is_move(removed: str, added: str) -> bool:
    """Same word count and same length: the declaration only moved."""
    return len(removed.split(" ")) == len(added.split(" ")) and len(removed) == len(added)


def find_breaks(f: File) -> list[Method]:
    """Return the potential compatibility breaks of a file.

    For each removed declaration, the last added declaration sharing its
    header is taken as its replacement. Methods come out in the order of
    the removed lines.
    """
    pattern = f.pattern
    if pattern is None:
        return []

    methods: list[Method] = []
    for removed in f.diff.removed:
        match = pattern.search(removed)
        if match is None:
            logger.debug("Not a declaration in %s: %r", f.name, removed)
            continue
        common_factor = match.group(0)

        closest_adding = ""
        move_only = False
        for added in f.diff.added:
            if not added.startswith(common_factor):
                continue
            if _is_move(removed, added):
                move_only = True
                break
            closest_adding = added

        if move_only:
            continue

        explanation = explain_changes(removed, closest_adding)
        if explanation:
            methods.append(
                Method(
                    before=removed,
                    after=closest_adding,
                    common_factor=common_factor,
                    explanation=explanation,
                )
            )

    return methods
