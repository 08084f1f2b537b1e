"""Domain entities.

Usage:
    from bank_accounts.domain.entities import BankAccount
"""

from bank_accounts.domain.entities.bank_account import (
    BankAccount,
    CreateBankAccountProps,
    UpdateBankAccountProps,
)

__all__ = ["BankAccount", "CreateBankAccountProps", "UpdateBankAccountProps"]
