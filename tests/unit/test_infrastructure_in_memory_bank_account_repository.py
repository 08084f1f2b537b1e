"""Unit tests for InMemoryBankAccountRepository.

Tests cover:
- create/read/update happy paths
- Not-found results for unknown ids
- Unexpected store faults wrapped as StoreError (never raised)
- Concurrent writers through the lock
"""

import threading
from collections import UserDict
from typing import cast
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from bank_accounts.core.enums import ErrorCode
from bank_accounts.core.errors import NotFoundError
from bank_accounts.core.result import Failure, Success
from bank_accounts.domain.entities.bank_account import (
    BankAccount,
    CreateBankAccountProps,
    UpdateBankAccountProps,
)
from bank_accounts.infrastructure.errors import InfrastructureErrorCode, StoreError
from bank_accounts.infrastructure.persistence.repositories import (
    InMemoryBankAccountRepository,
)
from tests.conftest import create_bank_account


class FaultyStore(UserDict):
    """Mapping that fails on every access."""

    def __getitem__(self, key):
        raise RuntimeError("store corrupted")

    def __setitem__(self, key, value):
        raise RuntimeError("store corrupted")

    def __contains__(self, key):
        raise RuntimeError("store corrupted")


@pytest.fixture
def account() -> BankAccount:
    result = BankAccount.create(
        CreateBankAccountProps(name="Test Account", owner="owner-1")
    )
    assert isinstance(result, Success)
    return result.value


@pytest.mark.unit
class TestCreate:
    """Test InMemoryBankAccountRepository.create."""

    def test_create_returns_account(self, repository, account):
        result = repository.create(account)

        assert isinstance(result, Success)
        assert result.value == account
        assert result.value.balance == 0
        assert result.value.welcome_message is None

    def test_create_overwrites_existing_id(self, repository):
        account_id = cast(UUID, uuid7())
        repository.create(create_bank_account(account_id=account_id, name="First"))

        result = repository.create(
            create_bank_account(account_id=account_id, name="Second")
        )

        assert isinstance(result, Success)
        read = repository.read(account_id)
        assert isinstance(read, Success)
        assert read.value.name == "Second"

    def test_create_logs_operation(self, repository, account, mock_logger):
        repository.create(account)

        mock_logger.bind.assert_called_with(repository="bank_account")
        mock_logger.info.assert_called_with(
            "Creating bank account", account_id=str(account.id)
        )

    def test_create_wraps_store_fault(self, mock_logger, account):
        repository = InMemoryBankAccountRepository(
            logger=mock_logger, store=FaultyStore()
        )

        result = repository.create(account)

        assert isinstance(result, Failure)
        assert isinstance(result.error, StoreError)
        assert result.error.code == ErrorCode.CREATE_FAILED
        assert result.error.kind == "CreateFailed"
        assert result.error.message == "Error creating bank account"
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.STORE_WRITE_ERROR
        )
        assert isinstance(result.error.cause, RuntimeError)
        assert result.error.details == {
            "error_type": "RuntimeError",
            "error_message": "store corrupted",
        }
        mock_logger.error.assert_called_once()


@pytest.mark.unit
class TestRead:
    """Test InMemoryBankAccountRepository.read."""

    def test_read_round_trip(self, repository, account):
        created = repository.create(account)
        assert isinstance(created, Success)

        result = repository.read(created.value.id)

        assert isinstance(result, Success)
        assert result.value == account

    def test_read_unknown_id_returns_not_found(self, repository):
        unknown_id = cast(UUID, uuid7())

        result = repository.read(unknown_id)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND
        assert result.error.kind == "AccountNotFound"
        assert result.error.resource_type == "BankAccount"
        assert result.error.resource_id == str(unknown_id)

    def test_read_wraps_store_fault(self, mock_logger):
        repository = InMemoryBankAccountRepository(
            logger=mock_logger, store=FaultyStore()
        )

        result = repository.read(cast(UUID, uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.READ_FAILED
        assert (
            result.error.infrastructure_code == InfrastructureErrorCode.STORE_READ_ERROR
        )


@pytest.mark.unit
class TestUpdate:
    """Test InMemoryBankAccountRepository.update."""

    def test_update_replaces_stored_value(self, repository, account):
        repository.create(account)
        updated_result = BankAccount.update(
            account,
            UpdateBankAccountProps(
                name="Updated Account Name",
                welcome_message="Welcome to your account updated",
            ),
        )
        assert isinstance(updated_result, Success)

        result = repository.update(account.id, updated_result.value)

        assert isinstance(result, Success)
        assert result.value.name == "Updated Account Name"
        assert result.value.welcome_message == "Welcome to your account updated"
        assert result.value.owner == account.owner
        assert result.value.balance == 0
        read = repository.read(account.id)
        assert isinstance(read, Success)
        assert read.value == updated_result.value

    def test_update_stores_value_as_given(self, repository, account):
        """The store does not merge fields; the caller's value wins."""
        repository.create(account)
        replacement = create_bank_account(account_id=account.id, owner="someone-else")

        result = repository.update(account.id, replacement)

        assert isinstance(result, Success)
        read = repository.read(account.id)
        assert isinstance(read, Success)
        assert read.value.owner == "someone-else"

    def test_update_unknown_id_returns_not_found(self, repository, account):
        result = repository.update(account.id, account)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND
        assert isinstance(repository.read(account.id), Failure)

    def test_update_wraps_store_fault(self, mock_logger, account):
        repository = InMemoryBankAccountRepository(
            logger=mock_logger, store=FaultyStore()
        )

        result = repository.update(account.id, account)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UPDATE_FAILED
        assert result.error.message == "Error updating bank account"


@pytest.mark.unit
class TestConcurrency:
    """Test lock-guarded access from multiple threads."""

    def test_concurrent_creates_are_all_stored(self):
        logger = MagicMock()
        logger.bind.return_value = logger
        repository = InMemoryBankAccountRepository(logger=logger)
        accounts = [create_bank_account(name=f"Account {i}") for i in range(50)]

        threads = [
            threading.Thread(target=repository.create, args=(a,)) for a in accounts
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for a in accounts:
            assert repository.read(a.id) == Success(value=a)
