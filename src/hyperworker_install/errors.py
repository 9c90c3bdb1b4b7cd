"""Exceptions raised by installer operations.

All of these are fatal for the run. The CLI error boundary prints their
message and exits non-zero.
"""

from pathlib import Path


class InstallerError(Exception):
    """Base class for fatal installer conditions."""


class SourceNotFoundError(InstallerError):
    """Raised when an explicitly requested source directory does not exist."""

    def __init__(self, source_dir: Path) -> None:
        super().__init__(f"Source directory does not exist: {source_dir}")
        self.source_dir = source_dir


class GitNotAvailableError(InstallerError):
    """Raised when a remote install is needed but git is not on PATH."""

    def __init__(self) -> None:
        super().__init__("git is required for remote installs but was not found on PATH.")


class CloneError(InstallerError):
    """Raised when cloning the remote repository fails."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to clone remote repository {url}\n{reason}")
        self.url = url


class StackNotFoundError(InstallerError):
    """Raised when no usable stack directory exists in the source."""


class TemplateIntegrityError(InstallerError):
    """Raised when a settings template shipped in the source cannot be parsed."""

    def __init__(self, template_path: Path, reason: str) -> None:
        super().__init__(f"Could not parse source settings at {template_path}: {reason}")
        self.template_path = template_path
