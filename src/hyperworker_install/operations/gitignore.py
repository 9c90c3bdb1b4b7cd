"""Ensure the target's .gitignore ignores the plans directory."""

from pathlib import Path

from hyperworker_install.constants import GITIGNORE_ENTRY
from hyperworker_install.models.results import GitignoreResult
from hyperworker_install.output import user_output, user_warning


def ensure_gitignore_entry(
    target_dir: Path,
    *,
    dry_run: bool,
    entry: str = GITIGNORE_ENTRY,
) -> GitignoreResult:
    """Append entry to <target_dir>/.gitignore unless a line already equals it.

    Only applies to git repositories (a .git entry exists in target_dir);
    otherwise a warning is printed and nothing is touched.
    """
    if not (target_dir / ".git").exists():
        user_warning(
            "Warning: Target directory is not a git repository. Skipping .gitignore update."
        )
        return GitignoreResult(status="skipped", reason="not a git repo")

    gitignore_path = target_dir / ".gitignore"
    entry_line = entry.encode("utf-8")

    if not gitignore_path.exists():
        if dry_run:
            user_output(f"[DRY RUN] Would create .gitignore with {entry}")
            return GitignoreResult(status="dry-run", action="would create")
        gitignore_path.write_bytes(entry_line + b"\n")
        user_output(f"Created .gitignore with {entry}")
        return GitignoreResult(status="created", action="created")

    # .gitignore need not be UTF-8; lines are compared as bytes.
    content = gitignore_path.read_bytes()
    if entry_line in content.splitlines():
        user_output(f".gitignore already contains {entry} - no changes needed.")
        return GitignoreResult(status="already-present")

    if dry_run:
        user_output(f"[DRY RUN] Would append {entry} to .gitignore")
        return GitignoreResult(status="dry-run", action="would append")

    separator = b"\n" if content and not content.endswith(b"\n") else b""
    with gitignore_path.open("ab") as f:
        f.write(separator + entry_line + b"\n")
    user_output(f"Appended {entry} to .gitignore")
    return GitignoreResult(status="updated", action="appended")
