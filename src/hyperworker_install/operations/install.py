"""Run a complete installation.

Steps, in order:
    1. Resolve the source (local directory or temporary clone)
    2. Select the stack
    3. Install skill files
    4. Reconcile project settings (<target>/.claude/settings.json)
    5. Reconcile user settings (<home>/.claude/settings.json)
    6. Ensure the .gitignore entry
    7. Print the summary

The temporary clone, if any, is removed whether or not the steps succeed.
"""

import logging

from hyperworker_install.constants import PROJECT_SETTINGS_TEMPLATE, USER_SETTINGS_TEMPLATE
from hyperworker_install.context import InstallContext
from hyperworker_install.models.options import InstallOptions
from hyperworker_install.models.results import InstallResults
from hyperworker_install.operations.gitignore import ensure_gitignore_entry
from hyperworker_install.operations.settings_merge import reconcile_settings
from hyperworker_install.operations.skills import install_skills
from hyperworker_install.operations.stack_selection import select_stack
from hyperworker_install.output import user_output
from hyperworker_install.rendering import print_install_summary
from hyperworker_install.sources.resolver import source_checkout

logger = logging.getLogger(__name__)


def run_install(options: InstallOptions, ctx: InstallContext) -> InstallResults:
    """Install the chosen stack into options.target.

    Args:
        options: Run options from the command line
        ctx: Collaborators and ambient locations

    Returns:
        Results of every step

    Raises:
        InstallerError: For fatal source, stack or template problems
        OSError: If a copy or settings write fails
    """
    if options.dry_run:
        user_output("=== DRY RUN MODE - no files will be written ===\n")

    with source_checkout(options, ctx) as source:
        source_dir = source.source_dir
        user_output(f"Source:  {source_dir}")
        user_output(f"Target:  {options.target}")
        user_output()

        stack = select_stack(options, source_dir, ctx.prompter)
        stack_dir = source_dir / stack
        logger.debug("Installing stack %s from %s", stack, stack_dir)

        skills = install_skills(options, ctx.prompter, stack_dir)

        project_settings = reconcile_settings(
            source_path=stack_dir / PROJECT_SETTINGS_TEMPLATE,
            target_path=options.target / ".claude" / "settings.json",
            label="project",
            options=options,
            prompter=ctx.prompter,
        )

        user_settings = reconcile_settings(
            source_path=stack_dir / USER_SETTINGS_TEMPLATE,
            target_path=ctx.home / ".claude" / "settings.json",
            label="user",
            options=options,
            prompter=ctx.prompter,
        )

        user_output()
        gitignore = ensure_gitignore_entry(options.target, dry_run=options.dry_run)

        results = InstallResults(
            stack=stack,
            skills=skills,
            project_settings=project_settings,
            user_settings=user_settings,
            gitignore=gitignore,
        )
        print_install_summary(results, dry_run=options.dry_run)

    if options.dry_run:
        user_output("\nDry run complete.")
    else:
        user_output("\nInstallation complete.")
    return results
