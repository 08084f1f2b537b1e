"""Application services.

Usage:
    from bank_accounts.application.services import BankAccountService
"""

from bank_accounts.application.services.bank_account_service import (
    BankAccountService,
)

__all__ = ["BankAccountService"]
