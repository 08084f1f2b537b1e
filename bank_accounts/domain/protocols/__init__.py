"""Domain ports (protocols) implemented by the infrastructure layer."""

from bank_accounts.domain.protocols.bank_account_repository import (
    BankAccountRepository,
)
from bank_accounts.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["BankAccountRepository", "LoggerProtocol"]
