"""Logging adapters implementing LoggerProtocol."""

from bank_accounts.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
