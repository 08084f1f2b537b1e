"""Repository implementations.

Usage:
    from bank_accounts.infrastructure.persistence.repositories import (
        InMemoryBankAccountRepository,
    )
"""

from bank_accounts.infrastructure.persistence.repositories.in_memory_bank_account_repository import (
    InMemoryBankAccountRepository,
)

__all__ = ["InMemoryBankAccountRepository"]
