"""In-memory query log fed by SQLAlchemy cursor events."""

from typing import List
from loguru import logger

QUERY_PREFIX = "SQL "


class QueryLogger:
    """Append-only log of executed statements and diagnostic messages.

    Statements are recorded with the "SQL " prefix; anything logged through
    log() is a plain message and is left out of get_queries().
    """

    def __init__(self, debug: bool = False):
        self.debug = debug
        self._messages: List[str] = []

    def log(self, message: str) -> None:
        self._messages.append(message)
        if self.debug:
            logger.debug(message)

    def log_query(self, conn, cursor, statement, parameters, context, executemany) -> None:
        """before_cursor_execute listener."""
        self.log(f"{QUERY_PREFIX}{statement}")

    def get_messages(self) -> List[str]:
        return list(self._messages)

    def get_queries(self) -> List[str]:
        return [m for m in self._messages if m.startswith(QUERY_PREFIX)]
