"""Git operations needed to fetch a remote source.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess (real.py)
- FakeGit: In-memory implementation for tests (fake.py)
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if a working git client is on PATH."""
        ...

    @abstractmethod
    def shallow_clone(self, url: str, destination: Path) -> None:
        """Clone url into destination with a depth of one commit.

        Raises:
            RuntimeError: If the clone fails
        """
        ...
