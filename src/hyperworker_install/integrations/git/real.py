"""Production git implementation using subprocess."""

import logging
import subprocess
from pathlib import Path

from hyperworker_install.integrations.git.abc import Git
from hyperworker_install.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealGit(Git):
    """Production implementation using subprocess."""

    def is_available(self) -> bool:
        try:
            result = subprocess.run(
                ["git", "--version"],
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return False
        logger.debug("git --version exited with %d", result.returncode)
        return result.returncode == 0

    def shallow_clone(self, url: str, destination: Path) -> None:
        logger.debug("Cloning %s into %s", url, destination)
        run_subprocess_with_context(
            ["git", "clone", "--depth", "1", url, str(destination)],
            operation_context=f"clone {url}",
        )
