"""Application service factories."""

from functools import lru_cache

from bank_accounts.application.services.bank_account_service import (
    BankAccountService,
)
from bank_accounts.core.container.infrastructure import get_logger
from bank_accounts.core.container.repositories import get_bank_account_repository


@lru_cache()
def get_bank_account_service() -> BankAccountService:
    """Get bank account service singleton (app-scoped).

    Returns:
        BankAccountService wired with the configured repository and logger.

    Usage:
        # Presentation Layer (FastAPI Depends)
        service: BankAccountService = Depends(get_bank_account_service)
    """
    return BankAccountService(
        repository=get_bank_account_repository(),
        logger=get_logger(),
    )
