"""Error reporting for failures before logging is configured.

Problems with the configuration file are found before the logging system
exists, because the logging settings live in that same file. They are
written straight to stderr in the ``prog: message`` form command line tools
use, followed by one indented line per detail.
"""

import sys
from typing import Any

from svg_combine.constants import EXIT_FAILURE, PROG_NAME
from svg_combine.exceptions import ConfigurationError


def format_startup_error(
    error_type: str, message: str, details: dict[str, Any] | None = None
) -> str:
    """Format an error report.

    Details without a value are left out.

    Args:
        error_type: Kind of error, e.g. "Configuration Error"
        message: Main error message
        details: Optional additional context

    Returns:
        The report, ending with a newline.
    """
    lines = [f"{PROG_NAME}: {error_type}: {message}"]
    lines.extend(
        f"  {key}: {value}" for key, value in (details or {}).items() if value is not None
    )
    return "\n".join(lines) + "\n"


def handle_startup_error(
    error_type: str, message: str, details: dict[str, Any] | None = None
) -> None:
    """Write an error report to stderr."""
    sys.stderr.write(format_startup_error(error_type, message, details))
    sys.stderr.flush()


def handle_configuration_error(error: ConfigurationError) -> int:
    """Report a configuration problem.

    Args:
        error: The failure raised while loading the configuration.

    Returns:
        The exit code for the run.
    """
    handle_startup_error("Configuration Error", error.message, error.details)
    return EXIT_FAILURE


def handle_keyboard_interrupt() -> int:
    """Report that the run was interrupted.

    Returns:
        The exit code for the run.
    """
    sys.stderr.write(f"\n{PROG_NAME}: interrupted by user\n")
    sys.stderr.flush()
    return EXIT_FAILURE
