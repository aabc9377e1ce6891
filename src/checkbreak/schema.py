"""check-break output schema — Pydantic v2 models."""

from __future__ import annotations

import json

from pydantic import BaseModel


class MethodBreak(BaseModel):
    """A public declaration whose change may break callers."""

    before: str
    after: str = ""
    common_factor: str
    explanation: str


class FileReport(BaseModel):
    """A changed file and the breaks found in it."""

    path: str
    status: str
    type_tag: str = ""
    breaks: list[MethodBreak] = []


class Meta(BaseModel):
    """Run metadata."""

    start_point: str
    end_point: str
    working_path: str = "."
    excluded: list[str] = []
    timing_ms: float | None = None


class CheckBreakOutput(BaseModel):
    """Top-level check-break output.

    ``supported`` lists every analysed file, with or without breaks;
    ``ignored`` lists the files whose language has no declaration pattern.
    """

    schema_version: str = "1.0"
    meta: Meta
    supported: list[FileReport] = []
    ignored: list[FileReport] = []

    @property
    def break_count(self) -> int:
        return sum(len(fr.breaks) for fr in self.supported)

    @property
    def has_breaks(self) -> bool:
        return self.break_count > 0


def export_json_schema() -> str:
    """Export the JSON schema as a string."""
    return json.dumps(CheckBreakOutput.model_json_schema(), indent=2)
