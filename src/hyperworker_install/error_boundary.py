"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at the CLI entry
point and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from hyperworker_install.errors import InstallerError
from hyperworker_install.output import user_error

logger = logging.getLogger(__name__)


T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - InstallerError: Missing source, missing git, clone failure, broken templates
        - OSError: Copy and write failures (permission denied, disk full, ...)
        - ValueError: Invalid input or configuration

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except InstallerError as e:
            logger.debug("Installer error", exc_info=True)
            user_error(str(e))
            raise SystemExit(1) from None
        except OSError as e:
            logger.debug("Filesystem error", exc_info=True)
            user_error(str(e))
            raise SystemExit(1) from None
        except ValueError as e:
            logger.debug("Invalid value", exc_info=True)
            user_error(str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
