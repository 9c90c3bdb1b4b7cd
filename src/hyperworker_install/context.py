"""Application context with dependency injection.

The InstallContext dataclass holds the collaborators (git client, prompter) and
the ambient locations (home directory, working directory, bundled stacks) the
installer needs. It is created once at the CLI entry point and passed explicitly
to every step, so no step reads process-global state on its own.
"""

from dataclasses import dataclass
from pathlib import Path

from hyperworker_install.integrations.git.abc import Git
from hyperworker_install.integrations.git.real import RealGit
from hyperworker_install.integrations.prompter.abc import Prompter
from hyperworker_install.integrations.prompter.real import ClickPrompter


@dataclass(frozen=True)
class InstallContext:
    """Immutable context holding all dependencies for installer operations.

    Attributes:
        git: Git client used for remote installs
        prompter: Source of answers for interactive questions
        home: Home directory; user-level settings live in <home>/.claude
        cwd: Working directory at CLI invocation (default install target)
        bundled_dir: Directory shipped with the package that may hold stacks
    """

    git: Git
    prompter: Prompter
    home: Path
    cwd: Path
    bundled_dir: Path

    @staticmethod
    def for_test(
        git: Git | None = None,
        prompter: Prompter | None = None,
        home: Path | None = None,
        cwd: Path | None = None,
        bundled_dir: Path | None = None,
    ) -> "InstallContext":
        """Create test context with fakes for anything not provided.

        Args:
            git: Optional Git implementation. If None, creates FakeGit.
            prompter: Optional Prompter. If None, creates a ScriptedPrompter with no answers.
            home: Home directory (defaults to Path("/fake/home"))
            cwd: Working directory (defaults to Path("/fake/cwd"))
            bundled_dir: Bundled stacks directory (defaults to Path("/fake/bundled"))
        """
        from hyperworker_install.integrations.git.fake import FakeGit
        from hyperworker_install.integrations.prompter.fake import ScriptedPrompter

        resolved_git: Git = git if git is not None else FakeGit()
        resolved_prompter: Prompter = prompter if prompter is not None else ScriptedPrompter([])

        return InstallContext(
            git=resolved_git,
            prompter=resolved_prompter,
            home=home if home is not None else Path("/fake/home"),
            cwd=cwd if cwd is not None else Path("/fake/cwd"),
            bundled_dir=bundled_dir if bundled_dir is not None else Path("/fake/bundled"),
        )


def get_bundled_dir() -> Path:
    """Directory of stack templates bundled with the package."""
    return Path(__file__).parent / "data"


def create_context() -> InstallContext:
    """Create production context with real implementations.

    Called once at CLI entry point.
    """
    return InstallContext(
        git=RealGit(),
        prompter=ClickPrompter(),
        home=Path.home(),
        cwd=Path.cwd(),
        bundled_dir=get_bundled_dir(),
    )
