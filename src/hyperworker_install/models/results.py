"""Result objects produced by each installer step.

Every step returns one of these and never mutates it afterwards. The summary
step reads them all.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

MergeStatus = Literal["skipped", "unchanged", "dry-run", "updated"]

GitignoreStatus = Literal["skipped", "already-present", "dry-run", "updated", "created"]


@dataclass(frozen=True)
class FileManifestEntry:
    """One file to install from a skill directory."""

    relative_path: Path
    source_path: Path
    destination_path: Path


@dataclass(frozen=True)
class SkillsReport:
    """Relative paths of installed and skipped skill files.

    In dry-run mode, installed means "would copy" and skipped means
    "would skip due to conflict".
    """

    installed: tuple[Path, ...] = ()
    skipped: tuple[Path, ...] = ()

    @staticmethod
    def empty() -> "SkillsReport":
        return SkillsReport()


@dataclass(frozen=True)
class MergeResult:
    """Outcome of reconciling one settings file.

    Attributes:
        status: skipped, unchanged, dry-run or updated
        merged: The merged settings, or None if the merge never ran
        added: Top-level keys that the merge introduced
        changed: Pre-existing top-level keys whose value the merge changed
        unchanged: Pre-existing top-level keys left untouched
    """

    status: MergeStatus
    merged: dict[str, Any] | None = None
    added: tuple[str, ...] = ()
    changed: tuple[str, ...] = ()
    unchanged: tuple[str, ...] = ()

    @staticmethod
    def skipped() -> "MergeResult":
        return MergeResult(status="skipped")


@dataclass(frozen=True)
class GitignoreResult:
    """Outcome of ensuring the ignore entry in .gitignore."""

    status: GitignoreStatus
    action: str | None = None
    reason: str | None = None


@dataclass(frozen=True)
class InstallResults:
    """All step results for one run, in execution order."""

    stack: str
    skills: SkillsReport
    project_settings: MergeResult
    user_settings: MergeResult
    gitignore: GitignoreResult
