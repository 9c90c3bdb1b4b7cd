import logging
import os
from pathlib import Path

import click

from hyperworker_install.constants import AVAILABLE_STACKS, DEBUG_ENV_VAR, DEFAULT_REMOTE_URL
from hyperworker_install.context import create_context
from hyperworker_install.error_boundary import cli_error_boundary
from hyperworker_install.models.options import InstallOptions
from hyperworker_install.operations.install import run_install
from hyperworker_install.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

logger = logging.getLogger(__name__)

# Enable debug logging if HYPERWORKER_DEBUG environment variable is set
if os.getenv(DEBUG_ENV_VAR):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.command("hyperworker-install", context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--target",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    default=None,
    help="Target project directory (default: current working directory).",
)
@click.option(
    "--source",
    type=click.Path(resolve_path=True, path_type=Path),
    default=None,
    help="Path to a local hyperworker checkout (default: stacks bundled with this tool).",
)
@click.option(
    "--remote",
    is_flag=False,
    flag_value=DEFAULT_REMOTE_URL,
    default=None,
    metavar="[URL]",
    help=f"Clone hyperworker into a temporary directory (default URL: {DEFAULT_REMOTE_URL}).",
)
@click.option(
    "--stack",
    type=click.Choice(AVAILABLE_STACKS),
    default=None,
    help="Stack variant to install (skips the interactive prompt).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview changes without writing any files.",
)
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    default=False,
    help="Non-interactive mode: auto-skip conflicts. Requires --stack.",
)
@click.pass_context
@cli_error_boundary
def install(
    ctx: click.Context,
    target: Path | None,
    source: Path | None,
    remote: str | None,
    stack: str | None,
    dry_run: bool,
    yes: bool,
) -> None:
    """Install Hyperworker Claude Code skills into a project.

    Copies the chosen stack's skills into <target>/.claude/skills, reverse-merges
    its settings templates into <target>/.claude/settings.json and
    ~/.claude/settings.json (existing values always win), and adds /plans to
    .gitignore. Existing files are never overwritten without confirmation.

    Examples:

        # Install from the bundled stacks into the current directory
        hyperworker-install --stack typescript

        # Install from GitHub into a specific project
        hyperworker-install --remote --target ~/my-project --stack typescript

        # Preview what would change
        hyperworker-install --stack kubernetes --dry-run

        # Non-interactive install (CI-friendly)
        hyperworker-install --stack typescript --yes
    """
    if yes and stack is None:
        raise click.UsageError("--yes mode requires --stack to be specified explicitly.")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    install_ctx = ctx.obj

    options = InstallOptions(
        target=target if target is not None else install_ctx.cwd,
        source=source,
        remote=remote,
        stack=stack,
        dry_run=dry_run,
        yes=yes,
    )
    logger.debug("Resolved options: %s", options)

    run_install(options, install_ctx)


def main() -> None:
    """Console script entry point."""
    install()


if __name__ == "__main__":
    main()
