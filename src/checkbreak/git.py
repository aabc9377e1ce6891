"""Git retrieval: references, changed files, per-file diffs and content.

All git subprocess calls live here. Nothing else touches git. Every call
takes the repository path explicitly; the process working directory is
never changed.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(RuntimeError):
    """A git command failed."""


def _run(args: list[str], repo_path: str | Path) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["git", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        cwd=str(repo_path),
        check=False,
    )


def _fail(command: str, result: subprocess.CompletedProcess[str], repo_path: str | Path) -> GitError:
    stderr = result.stderr.strip()
    # Extract just the first meaningful line from git's stderr
    first_line = stderr.split("\n")[0] if stderr else "unknown error"
    if "not a git repository" in stderr.lower():
        msg = f"Not a git repository: {repo_path}"
    else:
        msg = f"git {command} failed: {first_line}"
    logger.error(msg)
    return GitError(msg)


def ref_exists(ref: str, repo_path: str | Path = ".") -> bool:
    """Return True if *ref* resolves to a commit in the repository."""
    result = _run(["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"], repo_path)
    return result.returncode == 0


def changed_files(start: str, end: str, repo_path: str | Path = ".") -> list[str]:
    """Return ``<status> <path>`` lines for every file changed between two refs."""
    # Unquoted paths: non-ASCII names are printed as they are
    result = _run(["-c", "core.quotePath=false", "diff", "--name-status", start, end], repo_path)
    if result.returncode != 0:
        raise _fail("diff", result, repo_path)
    return [line for line in result.stdout.splitlines() if line.strip()]


def diff_file(start: str, end: str, path: str, repo_path: str | Path = ".") -> list[str]:
    """Return the unified diff lines of *path* between two refs."""
    result = _run(["diff", "--no-color", start, end, "--", path], repo_path)
    if result.returncode != 0:
        raise _fail("diff", result, repo_path)
    return result.stdout.splitlines()


def show_file(ref: str, path: str, repo_path: str | Path = ".") -> list[str]:
    """Return the lines of *path* as it was at *ref*."""
    result = _run(["show", f"{ref}:{path}"], repo_path)
    if result.returncode != 0:
        raise _fail("show", result, repo_path)
    return result.stdout.splitlines()


class GitRepository:
    """Git retrieval bound to one working path."""

    def __init__(self, repo_path: str | Path = ".") -> None:
        self.repo_path = repo_path

    def ref_exists(self, ref: str) -> bool:
        return ref_exists(ref, self.repo_path)

    def changed_files(self, start: str, end: str) -> list[str]:
        return changed_files(start, end, self.repo_path)

    def diff_file(self, start: str, end: str, path: str) -> list[str]:
        return diff_file(start, end, path, self.repo_path)

    def show_file(self, ref: str, path: str) -> list[str]:
        return show_file(ref, path, self.repo_path)
