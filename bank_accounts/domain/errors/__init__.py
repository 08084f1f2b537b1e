"""Domain error message constants.

Usage:
    from bank_accounts.domain.errors import BankAccountError
"""

from bank_accounts.domain.errors.bank_account_error import BankAccountError

__all__ = ["BankAccountError"]
