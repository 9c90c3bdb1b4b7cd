"""Fake git implementation for testing."""

import shutil
from pathlib import Path

from hyperworker_install.integrations.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Constructor Injection:
    - All behavior is provided via constructor parameters
    - Clone calls are recorded for assertions

    Examples:
        # git missing from PATH
        >>> git = FakeGit(available=False)

        # clone "succeeds" by copying a prepared directory
        >>> git = FakeGit(clone_from=prepared_source_dir)

        # clone fails
        >>> git = FakeGit(clone_error="fatal: repository not found")
    """

    def __init__(
        self,
        *,
        available: bool = True,
        clone_from: Path | None = None,
        clone_error: str | None = None,
    ) -> None:
        """Initialize fake with predetermined behavior.

        Args:
            available: Value returned from is_available()
            clone_from: Directory whose contents are copied into the clone destination
            clone_error: If set, shallow_clone raises RuntimeError with this message
        """
        self._available = available
        self._clone_from = clone_from
        self._clone_error = clone_error
        self._clone_calls: list[tuple[str, Path]] = []

    @property
    def clone_calls(self) -> list[tuple[str, Path]]:
        """Read-only access to (url, destination) pairs passed to shallow_clone."""
        return self._clone_calls

    def is_available(self) -> bool:
        return self._available

    def shallow_clone(self, url: str, destination: Path) -> None:
        self._clone_calls.append((url, destination))
        if self._clone_error is not None:
            raise RuntimeError(self._clone_error)
        if self._clone_from is not None:
            shutil.copytree(self._clone_from, destination, dirs_exist_ok=True)
