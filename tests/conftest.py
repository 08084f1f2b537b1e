"""Shared pytest fixtures.

Provides a mocked structured logger, a fresh in-memory repository and a
service wired to both, so each test starts from an empty store.
"""

from decimal import Decimal
from typing import cast
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from bank_accounts.application.services.bank_account_service import (
    BankAccountService,
)
from bank_accounts.domain.entities.bank_account import BankAccount
from bank_accounts.infrastructure.persistence.repositories import (
    InMemoryBankAccountRepository,
)


def create_bank_account(
    account_id: UUID | None = None,
    name: str = "Test Account",
    balance: Decimal = Decimal("0"),
    owner: str = "owner-1",
    sort_code: str = "123456",
    account_number: str = "12345678",
    welcome_message: str | None = None,
) -> BankAccount:
    """Helper to build BankAccount values directly (store-style rehydration)."""
    return BankAccount(
        id=account_id or cast(UUID, uuid7()),
        name=name,
        balance=balance,
        owner=owner,
        sort_code=sort_code,
        account_number=account_number,
        welcome_message=welcome_message,
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Mock LoggerProtocol; bind() returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def repository(mock_logger: MagicMock) -> InMemoryBankAccountRepository:
    """Empty in-memory repository."""
    return InMemoryBankAccountRepository(logger=mock_logger)


@pytest.fixture
def service(
    repository: InMemoryBankAccountRepository, mock_logger: MagicMock
) -> BankAccountService:
    """Service wired to the in-memory repository."""
    return BankAccountService(repository=repository, logger=mock_logger)
