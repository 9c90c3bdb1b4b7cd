"""Shared fixtures for hyperworker-install tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

StackFactory = Callable[..., Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click runner for invoking the command in-process."""
    return CliRunner()


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Empty project directory to install into."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Stand-in home directory so user settings never touch the real one."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Empty source checkout; populate it with make_stack."""
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def make_stack(source_dir: Path) -> StackFactory:
    """Factory that writes a stack into source_dir.

    Args (of the returned callable):
        name: Stack directory name
        skills: Mapping of "<skill>/<relative path>" -> file content
        settings: Project settings template (written as JSON), or None to omit
        user_settings: User settings template (written as JSON), or None to omit

    Example:
        stack_dir = make_stack(
            "typescript",
            skills={"prd/SKILL.md": "# PRD"},
            settings={"env": {"X": "1"}},
        )
    """

    def _make(
        name: str = "typescript",
        *,
        skills: dict[str, str] | None = None,
        settings: dict[str, Any] | None = None,
        user_settings: dict[str, Any] | None = None,
        root: Path | None = None,
    ) -> Path:
        stack_dir = (root if root is not None else source_dir) / name
        stack_dir.mkdir(parents=True, exist_ok=True)

        for relative, content in (skills or {}).items():
            path = stack_dir / ".claude" / "skills" / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        if settings is not None:
            (stack_dir / "settings.json").write_text(json.dumps(settings), encoding="utf-8")
        if user_settings is not None:
            (stack_dir / "user-settings.json").write_text(
                json.dumps(user_settings), encoding="utf-8"
            )
        return stack_dir

    return _make


def _snapshot_tree(root: Path) -> dict[str, bytes]:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[str, bytes]]:
    """Returns a function mapping every file under a root to its bytes."""
    return _snapshot_tree
