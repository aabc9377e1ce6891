"""Human-readable report of a check-break run."""

from __future__ import annotations

from checkbreak.schema import CheckBreakOutput, FileReport, MethodBreak

_STATUS_LABELS: dict[str, str] = {
    "M": "modified",
    "D": "deleted",
}


def _status_label(status: str) -> str:
    return _STATUS_LABELS.get(status, status)


def _format_break(b: MethodBreak) -> list[str]:
    lines = [f"  - {b.explanation}", f"      before: {b.before}"]
    if b.after:
        lines.append(f"      after:  {b.after}")
    return lines


def _format_file(fr: FileReport) -> list[str]:
    lines = [f"{fr.path} ({_status_label(fr.status)})"]
    for b in fr.breaks:
        lines.extend(_format_break(b))
    return lines


def format_text(output: CheckBreakOutput, *, show_ignored: bool = False) -> str:
    """Render the output for a terminal."""
    meta = output.meta
    lines: list[str] = [f"check-break {meta.start_point}..{meta.end_point}"]
    if meta.excluded:
        lines.append(f"Excluded: {', '.join(meta.excluded)}")
    lines.append("")

    with_breaks = [fr for fr in output.supported if fr.breaks]
    for fr in with_breaks:
        lines.extend(_format_file(fr))
        lines.append("")

    if show_ignored and output.ignored:
        lines.append(f"Ignored files ({len(output.ignored)}, language not supported):")
        lines.extend(f"  {fr.path}" for fr in output.ignored)
        lines.append("")

    count = output.break_count
    if count == 0:
        lines.append("No compatibility break found.")
    else:
        lines.append(
            f"{count} potential compatibility break{'s' if count != 1 else ''} "
            f"in {len(with_breaks)} file{'s' if len(with_breaks) != 1 else ''}"
        )
    return "\n".join(lines)
