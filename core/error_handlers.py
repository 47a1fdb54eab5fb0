"""Error handlers for the command-line application.

Provides consistent error formatting and exit status mapping for
exceptions that escape a command.
"""

import sys
import traceback
from typing import Callable, Dict, Optional, TextIO

from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

_EXIT_CODES: Dict[str, int] = {
    "validation_error": EXIT_USAGE,
}


def create_error_message(message: str, details: Optional[dict] = None) -> str:
    """Create a standardized one-line error message.

    Args:
        message: Error message.
        details: Optional error details; a "field" entry is appended.

    Returns:
        The formatted message, e.g. "Error: Please fill all fields".
    """
    text = f"Error: {message}"
    if details and details.get("field"):
        text += f" (field: {details['field']})"
    return text


def app_exception_handler(exc: AppException, stream: TextIO) -> int:
    """Handle custom application exceptions.

    Args:
        exc: Application exception instance.
        stream: Where the formatted error is written.

    Returns:
        Process exit status for the exception's category.
    """
    logger.warning("Application error: %s [%s]", exc.message, exc.code)
    print(create_error_message(exc.message, exc.details), file=stream)
    return _EXIT_CODES.get(exc.code, EXIT_FAILURE)


def generic_exception_handler(exc: Exception, stream: TextIO) -> int:
    """Handle all unhandled exceptions.

    Args:
        exc: Unhandled exception.
        stream: Where the formatted error is written.

    Returns:
        EXIT_FAILURE.
    """
    logger.error("Unhandled exception: %s", str(exc), exc_info=True)

    # Log full traceback for debugging
    logger.error("Traceback: %s", traceback.format_exc())

    print(create_error_message("An internal error occurred"), file=stream)
    return EXIT_FAILURE


def run_with_error_handling(command: Callable[[], int], stream: Optional[TextIO] = None) -> int:
    """Run `command` and turn any exception into an exit status.

    Args:
        command: Zero-argument callable returning an exit status.
        stream: Error output; defaults to stderr.
    """
    stream = stream or sys.stderr
    try:
        return command()
    except AppException as exc:
        return app_exception_handler(exc, stream)
    except Exception as exc:
        return generic_exception_handler(exc, stream)
