"""Unit tests for BankAccount domain entity.

Tests cover:
- Factory creation with Result types
- Validation order (name before owner)
- Generated sort code / account number formats
- Update derivation (only name and welcome message change)
- Structural invariants on direct construction

Architecture:
- Unit tests for domain entity (no dependencies)
"""

import re
from dataclasses import FrozenInstanceError
from decimal import Decimal
from unittest.mock import patch

import pytest

from bank_accounts.core.enums import ErrorCode
from bank_accounts.core.errors import ValidationError
from bank_accounts.core.result import Failure, Success
from bank_accounts.domain.entities.bank_account import (
    BankAccount,
    CreateBankAccountProps,
    UpdateBankAccountProps,
    generate_account_number,
    generate_sort_code,
)
from bank_accounts.domain.errors.bank_account_error import BankAccountError
from tests.conftest import create_bank_account


def _create(name: str | None = "Test Account", owner: str | None = "owner-1") -> BankAccount:
    result = BankAccount.create(CreateBankAccountProps(name=name, owner=owner))
    assert isinstance(result, Success)
    return result.value


# =============================================================================
# Creation
# =============================================================================


@pytest.mark.unit
class TestBankAccountCreate:
    """Test BankAccount.create factory."""

    def test_create_success(self):
        result = BankAccount.create(
            CreateBankAccountProps(name="Test Account", owner="owner-1")
        )

        assert isinstance(result, Success)
        account = result.value
        assert account.name == "Test Account"
        assert account.owner == "owner-1"
        assert account.balance == Decimal("0")
        assert account.welcome_message is None
        assert account.id is not None

    def test_create_generates_valid_codes(self):
        account = _create()

        assert re.fullmatch(r"\d{6}", account.sort_code)
        assert re.fullmatch(r"\d{8}", account.account_number)
        assert len(account.sort_code) == 6
        assert len(account.account_number) == 8

    def test_create_assigns_unique_ids(self):
        ids = {_create().id for _ in range(20)}
        assert len(ids) == 20

    @pytest.mark.parametrize("name", [None, ""])
    def test_create_fails_without_name(self, name):
        result = BankAccount.create(CreateBankAccountProps(name=name, owner="owner-1"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_ACCOUNT_NAME
        assert result.error.kind == "InvalidAccountName"
        assert result.error.message == "Account name cannot be empty or null"
        assert result.error.field == "name"

    @pytest.mark.parametrize("owner", [None, ""])
    def test_create_fails_without_owner(self, owner):
        result = BankAccount.create(
            CreateBankAccountProps(name="Test Account", owner=owner)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ACCOUNT_OWNER
        assert result.error.message == "Account owner cannot be empty or null"
        assert result.error.field == "owner"

    def test_name_check_precedes_owner_check(self):
        result = BankAccount.create(CreateBankAccountProps(name="", owner=""))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ACCOUNT_NAME

    def test_create_does_not_trim_whitespace(self):
        """Only presence is checked; whitespace names are accepted."""
        account = _create(name="  ")
        assert account.name == "  "


# =============================================================================
# Code Generation
# =============================================================================


@pytest.mark.unit
class TestCodeGeneration:
    """Test sort code and account number generators."""

    def test_sort_code_range(self):
        for _ in range(200):
            assert 100_000 <= int(generate_sort_code()) <= 999_999

    def test_account_number_range(self):
        for _ in range(200):
            assert 10_000_000 <= int(generate_account_number()) <= 99_999_999

    def test_sort_code_bounds(self):
        with patch(
            "bank_accounts.domain.entities.bank_account.secrets.randbelow"
        ) as mock_randbelow:
            mock_randbelow.return_value = 0
            assert generate_sort_code() == "100000"
            mock_randbelow.return_value = 899_999
            assert generate_sort_code() == "999999"

    def test_account_number_bounds(self):
        with patch(
            "bank_accounts.domain.entities.bank_account.secrets.randbelow"
        ) as mock_randbelow:
            mock_randbelow.return_value = 0
            assert generate_account_number() == "10000000"
            mock_randbelow.return_value = 89_999_999
            assert generate_account_number() == "99999999"


# =============================================================================
# Update
# =============================================================================


@pytest.mark.unit
class TestBankAccountUpdate:
    """Test BankAccount.update derivation."""

    def test_update_name_only(self):
        account = _create()

        result = BankAccount.update(account, UpdateBankAccountProps(name="New Name"))

        assert isinstance(result, Success)
        updated = result.value
        assert updated.name == "New Name"
        assert updated.welcome_message is None
        assert updated.id == account.id
        assert updated.owner == account.owner
        assert updated.balance == account.balance
        assert updated.sort_code == account.sort_code
        assert updated.account_number == account.account_number

    def test_update_welcome_message_only(self):
        account = _create()

        result = BankAccount.update(
            account, UpdateBankAccountProps(welcome_message="Welcome to my account")
        )

        assert isinstance(result, Success)
        assert result.value.name == "Test Account"
        assert result.value.welcome_message == "Welcome to my account"

    def test_update_omitted_fields_retain_prior_values(self):
        account = create_bank_account(name="Original", welcome_message="Hello")

        result = BankAccount.update(account, UpdateBankAccountProps())

        assert isinstance(result, Success)
        assert result.value == account

    def test_update_returns_new_instance(self):
        account = _create()

        result = BankAccount.update(account, UpdateBankAccountProps(name="Other"))

        assert isinstance(result, Success)
        assert result.value is not account
        assert account.name == "Test Account"

    def test_update_applies_explicit_empty_name(self):
        """Empty name on update is applied, not re-validated."""
        account = _create()

        result = BankAccount.update(account, UpdateBankAccountProps(name=""))

        assert isinstance(result, Success)
        assert result.value.name == ""


# =============================================================================
# Invariants
# =============================================================================


@pytest.mark.unit
class TestBankAccountInvariants:
    """Test structural invariants enforced on construction."""

    def test_is_immutable(self):
        account = _create()
        with pytest.raises(FrozenInstanceError):
            account.name = "Changed"  # type: ignore[misc]

    @pytest.mark.parametrize("sort_code", ["12345", "1234567", "12a456", ""])
    def test_invalid_sort_code_raises(self, sort_code):
        with pytest.raises(ValueError, match=BankAccountError.INVALID_SORT_CODE):
            create_bank_account(sort_code=sort_code)

    @pytest.mark.parametrize("account_number", ["1234567", "123456789", "1234567x"])
    def test_invalid_account_number_raises(self, account_number):
        with pytest.raises(ValueError, match=BankAccountError.INVALID_ACCOUNT_NUMBER):
            create_bank_account(account_number=account_number)

    def test_negative_balance_raises(self):
        with pytest.raises(ValueError, match=BankAccountError.NEGATIVE_BALANCE):
            create_bank_account(balance=Decimal("-0.01"))
