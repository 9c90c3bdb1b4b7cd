"""Terminal prompter backed by click."""

import click

from hyperworker_install.integrations.prompter.abc import Prompter


class ClickPrompter(Prompter):
    """Reads answers from the terminal with click.prompt."""

    def ask(self, question: str) -> str:
        answer = click.prompt(
            question,
            default="",
            show_default=False,
            prompt_suffix="",
            err=True,
        )
        return answer.strip()
