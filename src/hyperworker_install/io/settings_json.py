"""I/O operations for Claude Code settings.json files.

This module provides parsing of settings documents and atomic writes. A
settings document is any JSON object; no schema beyond that is enforced.
"""

import json
import logging
import math
import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any

from pydantic import JsonValue, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

SettingsDocument = dict[str, JsonValue]

_settings_adapter: TypeAdapter[SettingsDocument] = TypeAdapter(SettingsDocument)


class InvalidSettingsError(ValueError):
    """Raised when text is not a JSON object."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    if "recursion limit" in first["msg"]:
        return "nesting is too deep to parse (recursion limit exceeded)"
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{first['msg']} (at {location})"
    return first["msg"]


def _reject_non_finite(value: Any, location: str) -> None:
    # NaN, Infinity and overflowing literals such as 1e400 are not JSON numbers.
    if isinstance(value, float) and not math.isfinite(value):
        where = f" (at {location})" if location else ""
        raise InvalidSettingsError(f"non-finite number {value!r} is not valid JSON{where}")
    if isinstance(value, dict):
        for key, item in value.items():
            _reject_non_finite(item, f"{location}.{key}" if location else key)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _reject_non_finite(item, f"{location}.{index}" if location else str(index))


def parse_settings(text: str | bytes) -> dict[str, Any]:
    """Parse settings.json content.

    Args:
        text: Raw file content; bytes must be UTF-8

    Returns:
        The settings as a dict, in document key order

    Raises:
        InvalidSettingsError: If text is not valid JSON, not a JSON object, or
            holds a non-finite number
    """
    try:
        settings = _settings_adapter.validate_json(text)
    except ValidationError as e:
        raise InvalidSettingsError(_describe_validation_error(e)) from e
    _reject_non_finite(settings, "")
    return settings


def render_settings(settings: Any) -> str:
    """Render settings the way they are written to disk.

    Two-space indentation, key order preserved, trailing newline. Raises
    ValueError for non-finite floats rather than writing NaN or Infinity.
    """
    return json.dumps(settings, indent=2, ensure_ascii=False, allow_nan=False) + "\n"


@contextmanager
def atomic_write(path: Path) -> Iterator[IO[str]]:
    """Context manager yielding a text stream that replaces path on success.

    Content is written to a temporary file in the same directory, which is
    renamed over path only when the block exits without error. On any error
    the temporary file is removed and the exception propagates, so path is
    never observed half-written.

    Example:
        with atomic_write(settings_path) as f:
            f.write(render_settings(merged))
    """
    fd, temp_name = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            yield f
        # mkstemp creates files as 0600; keep the permissions of the file being replaced.
        if path.exists():
            shutil.copymode(path, temp_path)
        else:
            temp_path.chmod(0o644)
        temp_path.replace(path)
    except BaseException:
        logger.debug("Removing temporary file %s after failed write", temp_path)
        temp_path.unlink(missing_ok=True)
        raise


def save_settings(settings_path: Path, settings: dict[str, Any]) -> None:
    """Save settings.json to disk atomically.

    Creates parent directories if they don't exist.

    Args:
        settings_path: Path to settings.json file
        settings: Settings document to save
    """
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    with atomic_write(settings_path) as f:
        f.write(render_settings(settings))
