"""Logger factory."""

from functools import lru_cache
from typing import TYPE_CHECKING

from bank_accounts.core.config import settings

if TYPE_CHECKING:
    from bank_accounts.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Process-wide logger.

    JSON lines under testing and CI, colored console output elsewhere, both
    filtered at ``settings.log_level``.
    """
    from bank_accounts.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.is_testing or settings.is_ci,
        level=settings.log_level,
    )
