"""Run options resolved once from the command line."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InstallOptions:
    """Immutable configuration for a single installer run.

    Attributes:
        target: Project directory receiving skills, settings and .gitignore entry
        source: Explicit local source checkout, or None to auto-detect
        remote: Remote URL to clone from, or None if no remote was requested
        stack: Stack name chosen on the command line, or None to prompt
        dry_run: Report what would change without writing anything
        yes: Non-interactive mode; conflicts are skipped, never overwritten
    """

    target: Path
    source: Path | None = None
    remote: str | None = None
    stack: str | None = None
    dry_run: bool = False
    yes: bool = False

    def __post_init__(self) -> None:
        if self.yes and self.stack is None:
            msg = "--yes mode requires --stack to be specified explicitly."
            raise ValueError(msg)
