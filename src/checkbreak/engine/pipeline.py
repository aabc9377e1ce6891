"""End-to-end pipeline: two refs → CheckBreakOutput."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable

from checkbreak.config import DEFAULT_CONFIG_FILENAME, Config, load_configuration
from checkbreak.engine._types import File, Method, SourceHistory
from checkbreak.engine.classifier import find_breaks
from checkbreak.engine.exclusion import filter_excluded
from checkbreak.engine.extractor import extract_files
from checkbreak.git import GitRepository
from checkbreak.schema import CheckBreakOutput, FileReport, Meta, MethodBreak

logger = logging.getLogger(__name__)


class BootstrapError(RuntimeError):
    """The run cannot start: bad working path or unknown reference."""


def run_check(
    changed: list[str],
    start: str,
    end: str,
    history: SourceHistory,
    exclusions: Iterable[str] | None = None,
) -> tuple[list[tuple[File, list[Method]]], list[File]]:
    """Run the analysis on already listed changed files.

    Args:
        changed: ``<status> <path>`` lines, one per changed file.
        start: Start reference.
        end: End reference.
        history: Retrieval of per-file diffs and contents.
        exclusions: Path prefixes to leave out.

    Returns:
        ``(supported, ignored)`` where each supported file comes with its
        breaks, in diff order.
    """
    supported, ignored = extract_files(changed, start, end, history)
    excluded = list(exclusions or [])
    supported = filter_excluded(supported, excluded)
    ignored = filter_excluded(ignored, excluded)

    return [(f, find_breaks(f)) for f in supported], ignored


class Break:
    """A check between two references of a working tree."""

    def __init__(
        self,
        working_path: str,
        start_point: str,
        end_point: str,
        config: Config | None = None,
        repository: GitRepository | None = None,
    ) -> None:
        self.working_path = working_path
        self.start_point = start_point
        self.end_point = end_point
        self.config = config
        self.repository = repository or GitRepository(working_path)

    @classmethod
    def init(
        cls,
        working_path: str,
        start_point: str,
        end_point: str,
        config_filename: str = DEFAULT_CONFIG_FILENAME,
    ) -> Break:
        """Validate the working path and both references, load the configuration."""
        if not os.path.isdir(working_path):
            msg = f"Path {working_path} doesn't exist"
            raise BootstrapError(msg)

        repository = GitRepository(working_path)
        for ref in (start_point, end_point):
            if not repository.ref_exists(ref):
                msg = f"The object {ref} doesn't exist"
                raise BootstrapError(msg)

        return cls(
            working_path,
            start_point,
            end_point,
            config=load_configuration(working_path, config_filename),
            repository=repository,
        )

    @property
    def has_configuration(self) -> bool:
        return self.config is not None

    @property
    def exclusions(self) -> list[str]:
        if self.config is None:
            return []
        return self.config.excluded_paths

    def analyze(self) -> CheckBreakOutput:
        """Run the check and build the output."""
        t0 = time.monotonic()

        changed = self.repository.changed_files(self.start_point, self.end_point)
        logger.debug("%d changed files between %s and %s", len(changed), self.start_point, self.end_point)
        supported, ignored = run_check(
            changed,
            self.start_point,
            self.end_point,
            self.repository,
            self.exclusions,
        )

        elapsed_ms = (time.monotonic() - t0) * 1000
        return CheckBreakOutput(
            meta=Meta(
                start_point=self.start_point,
                end_point=self.end_point,
                working_path=str(self.working_path),
                excluded=self.exclusions,
                timing_ms=round(elapsed_ms, 2),
            ),
            supported=[_file_report(f, methods) for f, methods in supported],
            ignored=[_file_report(f, []) for f in ignored],
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _file_report(f: File, methods: list[Method]) -> FileReport:
    return FileReport(
        path=f.name,
        status=f.status,
        type_tag=f.type_tag,
        breaks=[
            MethodBreak(
                before=m.before,
                after=m.after,
                common_factor=m.common_factor,
                explanation=m.explanation,
            )
            for m in methods
        ],
    )
