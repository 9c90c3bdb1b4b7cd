"""User-facing output helpers.

Messages for the person running the installer go to stderr through click so
they are captured consistently by click's test runner. Diagnostics for
developers use the logging module instead.
"""

import click


def user_output(message: str = "") -> None:
    """Write a line of user-facing output to stderr."""
    click.echo(message, err=True)


def user_warning(message: str) -> None:
    """Write a warning line in yellow."""
    user_output(click.style(message, fg="yellow"))


def user_error(message: str) -> None:
    """Write an error line with a red "Error:" prefix."""
    user_output(click.style("Error: ", fg="red") + message)
