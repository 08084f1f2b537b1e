"""Structured logging port.

The store and the service log through this protocol; the container decides
which adapter backs it. Messages are fixed strings and variable data goes in
keyword context, e.g. ``logger.info("Reading bank account", account_id=...)``.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Leveled structured logger with immutable context binding."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation; ``error`` adds the exception type and text."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every event.

        The receiver is left unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Same as bind()."""
        ...
