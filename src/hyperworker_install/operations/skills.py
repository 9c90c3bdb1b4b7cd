"""Skill file installation with per-file conflict resolution.

Each file from the chosen stack's skills directory is handled independently:

- dry-run: nothing is written; the file is reported as would-copy or
  would-skip depending on whether the destination exists
- destination missing: copy it
- destination present, non-interactive: skip it
- destination present, interactive: ask skip / overwrite / diff, repeating
  the question after a diff until the user skips or overwrites
"""

import logging
from enum import Enum
from pathlib import Path

from hyperworker_install.integrations.prompter.abc import Prompter
from hyperworker_install.io.files import copy_file, render_diff, walk_files
from hyperworker_install.models.options import InstallOptions
from hyperworker_install.models.results import FileManifestEntry, SkillsReport
from hyperworker_install.output import user_output

logger = logging.getLogger(__name__)


class ConflictChoice(Enum):
    """Answers accepted when a destination file already exists."""

    SKIP = "skip"
    OVERWRITE = "overwrite"
    DIFF = "diff"


_CHOICE_ALIASES = {
    "s": ConflictChoice.SKIP,
    "skip": ConflictChoice.SKIP,
    "o": ConflictChoice.OVERWRITE,
    "overwrite": ConflictChoice.OVERWRITE,
    "d": ConflictChoice.DIFF,
    "diff": ConflictChoice.DIFF,
}


def parse_conflict_choice(answer: str) -> ConflictChoice | None:
    """Map a typed answer to a choice, or None if it is not recognized."""
    return _CHOICE_ALIASES.get(answer.strip().lower())


def build_skill_manifest(skills_source: Path, skills_destination: Path) -> list[FileManifestEntry]:
    """List every file of every skill directory under skills_source.

    Each direct child directory of skills_source is one skill; files directly
    inside skills_source are not part of any skill and are ignored.

    Args:
        skills_source: <source>/<stack>/.claude/skills
        skills_destination: <target>/.claude/skills

    Returns:
        Entries ordered by skill name, then by path within the skill
    """
    entries: list[FileManifestEntry] = []
    skill_dirs = sorted(child for child in skills_source.iterdir() if child.is_dir())
    for skill_dir in skill_dirs:
        for relative in walk_files(skill_dir):
            relative_path = Path(skill_dir.name) / relative
            entries.append(
                FileManifestEntry(
                    relative_path=relative_path,
                    source_path=skill_dir / relative,
                    destination_path=skills_destination / relative_path,
                )
            )
    return entries


def _ask_until_resolved(entry: FileManifestEntry, prompter: Prompter) -> ConflictChoice:
    while True:
        answer = prompter.ask(
            f"  File exists: {entry.relative_path} - [s]kip / [o]verwrite / [d]iff? "
        )
        choice = parse_conflict_choice(answer)

        if choice is None:
            user_output("  Please enter s (skip), o (overwrite), or d (diff).")
            continue

        if choice is ConflictChoice.DIFF:
            user_output()
            user_output(render_diff(entry.destination_path, entry.source_path))
            user_output()
            continue

        return choice


def install_skill_files(
    entries: list[FileManifestEntry],
    options: InstallOptions,
    prompter: Prompter,
) -> SkillsReport:
    """Decide and apply one action per manifest entry.

    Copy failures propagate and abort the run.

    Args:
        entries: Files to install
        options: Run options (dry_run and yes are consulted)
        prompter: Source of answers for interactive conflicts

    Returns:
        Relative paths installed (or would be) and skipped
    """
    installed: list[Path] = []
    skipped: list[Path] = []

    for entry in entries:
        exists = entry.destination_path.exists()
        logger.debug("Processing %s (destination exists: %s)", entry.relative_path, exists)

        if options.dry_run:
            if exists:
                user_output(
                    f"  [DRY RUN] CONFLICT: {entry.relative_path} (would skip - file exists)"
                )
                skipped.append(entry.relative_path)
            else:
                user_output(f"  [DRY RUN] COPY: {entry.relative_path}")
                installed.append(entry.relative_path)
            continue

        if not exists:
            copy_file(entry.source_path, entry.destination_path)
            user_output(f"  Installed: {entry.relative_path}")
            installed.append(entry.relative_path)
            continue

        if options.yes:
            user_output(f"  Skipped (exists): {entry.relative_path}")
            skipped.append(entry.relative_path)
            continue

        choice = _ask_until_resolved(entry, prompter)
        if choice is ConflictChoice.OVERWRITE:
            copy_file(entry.source_path, entry.destination_path)
            user_output(f"  Overwritten: {entry.relative_path}")
            installed.append(entry.relative_path)
        else:
            user_output(f"  Skipped: {entry.relative_path}")
            skipped.append(entry.relative_path)

    return SkillsReport(installed=tuple(installed), skipped=tuple(skipped))


def install_skills(
    options: InstallOptions,
    prompter: Prompter,
    stack_dir: Path,
) -> SkillsReport:
    """Install the skills of one stack into the target project.

    Args:
        options: Run options; options.target receives .claude/skills
        prompter: Source of answers for interactive conflicts
        stack_dir: <source>/<stack>

    Returns:
        Report of installed and skipped files, printed as a short summary
    """
    skills_source = stack_dir / ".claude" / "skills"
    skills_destination = options.target / ".claude" / "skills"

    if not skills_source.is_dir():
        user_output("No skills directory found in source stack. Skipping skill installation.")
        return SkillsReport.empty()

    entries = build_skill_manifest(skills_source, skills_destination)
    if not entries:
        user_output("No skill files found. Skipping skill installation.")
        return SkillsReport.empty()

    user_output(f"\nInstalling skills from {stack_dir.name} stack...")
    report = install_skill_files(entries, options, prompter)

    user_output(
        f"\nSkills summary: {len(report.installed)} installed, {len(report.skipped)} skipped."
    )
    if report.installed:
        user_output("  Installed:")
        for path in report.installed:
            user_output(f"    - {path}")
    if report.skipped:
        user_output("  Skipped:")
        for path in report.skipped:
            user_output(f"    - {path}")

    return report
