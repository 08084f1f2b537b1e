"""Repository dependency factories.

The store backend is selected from ``settings.repository_backend``. The
in-memory store keeps state for the life of the process, so it is an
application-scoped singleton.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from bank_accounts.core.config import settings
from bank_accounts.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from bank_accounts.domain.protocols.bank_account_repository import (
        BankAccountRepository,
    )


@lru_cache()
def get_bank_account_repository() -> "BankAccountRepository":
    """Get bank account repository singleton (app-scoped).

    Returns:
        Repository implementing BankAccountRepository.

    Raises:
        ValueError: If the configured backend is unsupported.
    """
    backend = settings.repository_backend

    if backend == "memory":
        from bank_accounts.infrastructure.persistence.repositories import (
            InMemoryBankAccountRepository,
        )

        return InMemoryBankAccountRepository(logger=get_logger())

    raise ValueError(
        f"Unsupported repository backend: {backend}. Supported: 'memory'"
    )
