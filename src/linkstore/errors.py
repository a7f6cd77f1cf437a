"""Process-terminating error path used when the database is unreachable."""

from typing import NoReturn
from loguru import logger


class FatalError(SystemExit):
    """Terminates the current process/request.

    Subclasses SystemExit so ordinary ``except Exception`` handlers never
    swallow it; only the top-level runner is expected to handle it.
    """

    def __init__(self, message: str = "", title: str = "", status: int = 503):
        super().__init__(1)
        self.message = message
        self.title = title
        self.status = status

    def __str__(self) -> str:
        if self.title:
            return f"{self.title}: {self.message}"
        return self.message


def fatal_error(message: str, title: str = "", status: int = 503) -> NoReturn:
    """Default fatal error display: log and terminate."""
    logger.critical("{} ({}): {}", title or "Fatal error", status, message)
    raise FatalError(message, title, status)
