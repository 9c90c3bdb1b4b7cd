"""Final summary of an installer run."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from hyperworker_install.constants import GITIGNORE_ENTRY
from hyperworker_install.models.results import GitignoreResult, InstallResults, MergeResult


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def describe_merge(result: MergeResult) -> str:
    if result.status == "skipped":
        return "Skipped"
    if result.status == "unchanged":
        return f"Already up to date ({_plural(len(result.unchanged), 'key')} unchanged)"
    line = (
        f"{_plural(len(result.added), 'key')} added, "
        f"{_plural(len(result.changed), 'key')} merged, "
        f"{_plural(len(result.unchanged), 'key')} unchanged"
    )
    if result.status == "dry-run":
        return f"{line} (dry run)"
    return line


def describe_gitignore(result: GitignoreResult) -> str:
    if result.status == "already-present":
        return f"Already contains {GITIGNORE_ENTRY} - no changes"
    if result.status == "updated":
        return f"Appended {GITIGNORE_ENTRY}"
    if result.status == "created":
        return f"Created with {GITIGNORE_ENTRY}"
    if result.status == "dry-run":
        return (result.action or "would change").capitalize()
    return f"Skipped ({result.reason or 'n/a'})"


NEXT_STEPS = (
    "1. Start a tmux session: tmux new -s dev",
    "2. Run Claude Code: claude",
    "3. Try creating a PRD: /prd",
)


def format_install_summary(results: InstallResults, *, dry_run: bool) -> Panel:
    """Build the summary panel from every step's result.

    Example:
        >>> panel = format_install_summary(results, dry_run=False)
        >>> Console(stderr=True).print(panel)
    """
    skills = results.skills
    if not skills.installed and not skills.skipped:
        skills_line = "(none found)"
    else:
        skills_line = f"{len(skills.installed)} installed, {len(skills.skipped)} skipped"

    lines = [
        Text(f"Stack: {results.stack}", style="bold"),
        Text(""),
        Text("Skills:", style="bold"),
        Text(f"  {skills_line}"),
        Text("Project settings (.claude/settings.json):", style="bold"),
        Text(f"  {describe_merge(results.project_settings)}"),
        Text("User settings (~/.claude/settings.json):", style="bold"),
        Text(f"  {describe_merge(results.user_settings)}"),
        Text(".gitignore:", style="bold"),
        Text(f"  {describe_gitignore(results.gitignore)}"),
    ]
    if not dry_run:
        lines.append(Text(""))
        lines.append(Text("Next steps:", style="bold"))
        lines.extend(Text(f"  {step}") for step in NEXT_STEPS)

    title = "Dry Run Summary - no files were written" if dry_run else "Installation Summary"
    return Panel(
        Text("\n").join(lines),
        title=title,
        border_style="yellow" if dry_run else "green",
        padding=(1, 2),
    )


def print_install_summary(
    results: InstallResults, *, dry_run: bool, console: Console | None = None
) -> None:
    if console is None:
        console = Console(stderr=True)
    console.print()
    console.print(format_install_summary(results, dry_run=dry_run))
