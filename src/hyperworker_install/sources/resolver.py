"""Locate the directory holding stack templates.

Priority:
    1. An explicit --source directory
    2. The stacks bundled with this package, unless --remote was given
    3. A shallow clone of the remote repository into a temporary directory
"""

import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from hyperworker_install.constants import DEFAULT_REMOTE_URL
from hyperworker_install.context import InstallContext
from hyperworker_install.errors import CloneError, GitNotAvailableError, SourceNotFoundError
from hyperworker_install.models.options import InstallOptions
from hyperworker_install.operations.stack_selection import discover_stacks
from hyperworker_install.output import user_output, user_warning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSource:
    """Where stacks are read from, and the temporary clone to remove afterwards.

    Attributes:
        source_dir: Directory containing <stack>/ subdirectories
        temp_dir: Temporary clone directory, or None for local sources
    """

    source_dir: Path
    temp_dir: Path | None = None

    def cleanup(self) -> None:
        """Remove the temporary clone, if any. No-op for local sources."""
        if self.temp_dir is None:
            return
        try:
            shutil.rmtree(self.temp_dir)
        except OSError as e:
            user_warning(f"Warning: Could not clean up temporary directory {self.temp_dir}: {e}")
            return
        user_output("Cleaned up temporary directory.")


def _clone_remote(url: str, ctx: InstallContext) -> ResolvedSource:
    if not ctx.git.is_available():
        raise GitNotAvailableError()

    temp_dir = Path(tempfile.mkdtemp(prefix="hyperworker-"))
    logger.debug("Created temporary clone directory %s", temp_dir)
    try:
        ctx.git.shallow_clone(url, temp_dir)
    except RuntimeError as e:
        shutil.rmtree(temp_dir, ignore_errors=True)
        raise CloneError(url, str(e)) from e

    return ResolvedSource(source_dir=temp_dir, temp_dir=temp_dir)


def resolve_source(options: InstallOptions, ctx: InstallContext) -> ResolvedSource:
    """Decide where stacks come from, cloning the remote when needed.

    Raises:
        SourceNotFoundError: If an explicit source directory does not exist
        GitNotAvailableError: If a clone is needed and git is missing
        CloneError: If the clone fails (the temporary directory is removed first)
    """
    if options.source is not None:
        if not options.source.exists():
            raise SourceNotFoundError(options.source)
        return ResolvedSource(source_dir=options.source)

    if options.remote is None and discover_stacks(ctx.bundled_dir):
        return ResolvedSource(source_dir=ctx.bundled_dir)

    if options.remote is not None:
        url = options.remote
        user_output(f"Cloning from remote: {url}")
    else:
        url = DEFAULT_REMOTE_URL
        user_output(f"Stack directories not found locally. Cloning from: {url}")

    return _clone_remote(url, ctx)


@contextmanager
def source_checkout(options: InstallOptions, ctx: InstallContext) -> Iterator[ResolvedSource]:
    """Resolve the source and guarantee cleanup on every exit path.

    Example:
        with source_checkout(options, ctx) as source:
            install_from(source.source_dir)
    """
    resolved = resolve_source(options, ctx)
    try:
        yield resolved
    finally:
        resolved.cleanup()
