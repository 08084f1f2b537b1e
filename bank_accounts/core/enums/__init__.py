"""Enumerations shared across layers."""

from bank_accounts.core.enums.environment import Environment
from bank_accounts.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
