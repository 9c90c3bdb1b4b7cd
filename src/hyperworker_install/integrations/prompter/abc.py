"""Interactive terminal input.

The installer asks questions one line at a time. Everything that prompts goes
through a Prompter so tests can script the answers.
"""

from abc import ABC, abstractmethod


class Prompter(ABC):
    """Synchronous question/answer interface."""

    @abstractmethod
    def ask(self, question: str) -> str:
        """Show question and return the answer with surrounding whitespace removed."""
        ...
