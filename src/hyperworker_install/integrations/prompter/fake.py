"""Scripted prompter for testing."""

from collections.abc import Sequence

from hyperworker_install.integrations.prompter.abc import Prompter


class ScriptedPrompter(Prompter):
    """Returns a fixed sequence of answers and records every question asked.

    Asking more questions than answers were scripted is a test bug and raises
    AssertionError so the failure points at the extra prompt.
    """

    def __init__(self, answers: Sequence[str]) -> None:
        self._answers = list(answers)
        self._questions: list[str] = []

    @property
    def questions(self) -> list[str]:
        """Questions asked so far, in order."""
        return self._questions

    @property
    def remaining_answers(self) -> list[str]:
        return list(self._answers)

    def ask(self, question: str) -> str:
        self._questions.append(question)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt with no scripted answer: {question!r}")
        return self._answers.pop(0).strip()
