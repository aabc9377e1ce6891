"""Parameter comparison for breaking change detection.

Standalone module — no engine imports, just string analysis. Parameters are
the comma-separated chunks of a declaration line, compared by position only:
there is no attempt to follow a parameter that moved or was renamed.
"""

from __future__ import annotations

DELETION_OF_METHOD = "Deletion of method"
DELETION_OF_PARAMETER = "Deletion of parameter"
DELETION_OF_DEFAULT_PARAMETER = "Deletion of default parameter"
ADDING_PARAMETER_WITHOUT_DEFAULT = "Adding a parameter without default value"
UNKNOWN_SIGNATURE_CHANGE = "Unknown signature change"


def has_default_parameter(params: list[str]) -> bool:
    """Return True if any parameter carries a default value."""
    return any("=" in p for p in params)


def differences(before: list[str], after: list[str]) -> tuple[list[str], list[str]]:
    """Compare two parameter lists position by position.

    The shorter list is padded with empty strings. Returns the
    ``(removed, added)`` tokens; a position whose tokens both exist but
    differ contributes to both.
    """
    length = max(len(before), len(after))
    before = before + [""] * (length - len(before))
    after = after + [""] * (length - len(after))

    removed: list[str] = []
    added: list[str] = []
    for old, new in zip(before, after):
        if old == new:
            continue
        if old == "":
            added.append(new)
        elif new == "":
            removed.append(old)
        else:
            removed.append(old)
            added.append(new)
    return removed, added


def explain_changes(before: str, after: str) -> str:
    """Return the reason *after* breaks callers of *before*.

    An empty string means the change is backward-compatible.
    """
    if after == "":
        return DELETION_OF_METHOD

    removed, added = differences(before.split(","), after.split(","))

    if len(removed) > len(added):
        if has_default_parameter(removed) and not has_default_parameter(added):
            return DELETION_OF_DEFAULT_PARAMETER
        return DELETION_OF_PARAMETER

    if len(removed) < len(added):
        if not has_default_parameter(added):
            return ADDING_PARAMETER_WITHOUT_DEFAULT
        return ""

    # Same arity: type-only changes are not told apart from the rest
    if removed and not has_default_parameter(added):
        if has_default_parameter(removed):
            return DELETION_OF_DEFAULT_PARAMETER
        return ADDING_PARAMETER_WITHOUT_DEFAULT
    return UNKNOWN_SIGNATURE_CHANGE
