"""Choose which stack to install."""

from pathlib import Path

from hyperworker_install.constants import AVAILABLE_STACKS
from hyperworker_install.errors import StackNotFoundError
from hyperworker_install.integrations.prompter.abc import Prompter
from hyperworker_install.models.options import InstallOptions
from hyperworker_install.output import user_output


def discover_stacks(source_dir: Path) -> list[str]:
    """Known stacks whose directories exist in source_dir, in canonical order."""
    return [name for name in AVAILABLE_STACKS if (source_dir / name).is_dir()]


def parse_stack_answer(answer: str, stacks: list[str]) -> str | None:
    """Interpret a menu answer as a 1-based number or a stack name."""
    cleaned = answer.strip().lower()
    if cleaned.isdigit():
        index = int(cleaned)
        if 1 <= index <= len(stacks):
            return stacks[index - 1]
        return None
    if cleaned in stacks:
        return cleaned
    return None


def select_stack(options: InstallOptions, source_dir: Path, prompter: Prompter) -> str:
    """Return the stack to install.

    Uses options.stack when given. Otherwise shows a numbered menu of the
    stacks present in source_dir and asks until a valid choice is made.

    Raises:
        StackNotFoundError: If the requested stack is missing from the source, or
            no stack directories exist at all
        ValueError: If no stack was given in non-interactive mode
    """
    if options.stack is not None:
        stack_dir = source_dir / options.stack
        if not stack_dir.is_dir():
            raise StackNotFoundError(f"Stack directory not found: {stack_dir}")
        user_output(f"Selected stack: {options.stack}")
        return options.stack

    if options.yes:
        msg = "--yes mode requires --stack to be specified explicitly."
        raise ValueError(msg)

    stacks = discover_stacks(source_dir)
    if not stacks:
        raise StackNotFoundError(f"No stack directories found in source directory: {source_dir}")

    user_output("Which stack would you like to install?\n")
    for number, name in enumerate(stacks, start=1):
        user_output(f"  [{number}] {name.capitalize()}")
    user_output()

    while True:
        answer = prompter.ask("Enter selection (number): ")
        selected = parse_stack_answer(answer, stacks)
        if selected is not None:
            user_output(f"\nSelected stack: {selected}")
            return selected
        user_output(
            f'Invalid selection "{answer}". '
            f"Please enter a number (1-{len(stacks)}) or a stack name."
        )
