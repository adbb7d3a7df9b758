"""Error handling for rubies."""
from typing import Any, Dict, Optional

import structlog

EXIT_FAILURE = 1
EXIT_USAGE = 2


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[Any] = None,
) -> None:
    """Log an error with context."""
    logger = logger or structlog.get_logger(__name__)

    error_info: Dict[str, Any] = {
        "error_type": error.__class__.__name__,
        "error_message": str(error),
    }
    if context:
        error_info["context"] = context
    if isinstance(error, RubiesError):
        error_info["exit_code"] = error.exit_code
        error_info["details"] = error.details

    logger.error({"event": "rubies_error", **error_info})


class RubiesError(Exception):
    """Base error class for rubies."""

    def __init__(
        self,
        message: str,
        exit_code: int = EXIT_FAILURE,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
            "details": self.details,
        }


class ResolutionError(RubiesError):
    """A ruby could not be queried for its engine, version and gem path."""

    def __init__(
        self,
        message: str,
        command: str,
        returncode: Optional[int] = None,
        output: Optional[str] = None,
    ):
        super().__init__(
            message,
            exit_code=EXIT_FAILURE,
            details={"command": command, "returncode": returncode, "output": output},
        )
        self.command = command
        self.returncode = returncode
        self.output = output


class UsageError(RubiesError):
    """Missing or unknown subcommand, or a missing argument."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, exit_code=EXIT_USAGE, details=details)
