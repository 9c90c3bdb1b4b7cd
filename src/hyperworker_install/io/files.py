"""Filesystem helpers for skill files: walking, copying and diffing."""

import difflib
import logging
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def walk_files(root: Path) -> list[Path]:
    """Return every file under root as a path relative to root, in sorted order."""
    return sorted(path.relative_to(root) for path in root.rglob("*") if not path.is_dir())


def copy_file(source: Path, destination: Path) -> None:
    """Copy source over destination without exposing a partial file.

    Parent directories are created as needed. The copy lands in a temporary
    sibling first and is renamed into place; on failure the temporary file is
    removed and the error propagates.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        dir=destination.parent,
        prefix=f".{destination.name}.",
        suffix=".tmp",
        delete=False,
    ) as handle:
        temp_path = Path(handle.name)
    try:
        shutil.copy2(source, temp_path)
        temp_path.replace(destination)
    except BaseException:
        logger.debug("Removing temporary file %s after failed copy", temp_path)
        temp_path.unlink(missing_ok=True)
        raise


def render_diff(existing: Path, incoming: Path) -> str:
    """Unified diff from the existing file to the incoming one.

    Returns "Files are identical." when contents match, and
    "Binary files differ." when either file is not UTF-8 text.
    """
    existing_bytes = existing.read_bytes()
    incoming_bytes = incoming.read_bytes()
    if existing_bytes == incoming_bytes:
        return "Files are identical."

    try:
        existing_lines = existing_bytes.decode("utf-8").splitlines(keepends=True)
        incoming_lines = incoming_bytes.decode("utf-8").splitlines(keepends=True)
    except UnicodeDecodeError:
        return "Binary files differ."

    diff = difflib.unified_diff(
        existing_lines,
        incoming_lines,
        fromfile=str(existing),
        tofile=str(incoming),
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in diff).rstrip("\n")
