"""BankAccount domain entity.

Represents a customer bank account identified by a UK-style sort code and
account number.

Architecture:
    - Pure domain entity (no infrastructure dependencies, no logging)
    - Immutable value: updates derive a new instance, never mutate
    - Factory methods return Result types (railway-oriented programming)

Usage:
    from bank_accounts.core.result import Failure, Success
    from bank_accounts.domain.entities import BankAccount, CreateBankAccountProps

    result = BankAccount.create(
        CreateBankAccountProps(name="Everyday Account", owner="owner-123")
    )
    match result:
        case Success(value=account):
            print(account.sort_code, account.account_number)
        case Failure(error=error):
            print(error.kind)
"""

import re
import secrets
from dataclasses import dataclass, replace
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7

from bank_accounts.core.enums import ErrorCode
from bank_accounts.core.errors import DomainError, ValidationError
from bank_accounts.core.result import Failure, Result, Success
from bank_accounts.domain.errors.bank_account_error import BankAccountError

SORT_CODE_MIN = 100_000
SORT_CODE_MAX = 999_999
ACCOUNT_NUMBER_MIN = 10_000_000
ACCOUNT_NUMBER_MAX = 99_999_999

_SORT_CODE_PATTERN = re.compile(r"[0-9]{6}")
_ACCOUNT_NUMBER_PATTERN = re.compile(r"[0-9]{8}")


@dataclass(frozen=True, kw_only=True)
class CreateBankAccountProps:
    """Input for opening a new bank account.

    Attributes:
        name: Display name for the account.
        owner: Identifier of the account holder.
    """

    name: str | None = None
    owner: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateBankAccountProps:
    """Partial change set for an existing bank account.

    Fields left as None keep their current value.

    Attributes:
        name: New display name.
        welcome_message: New welcome message.
    """

    name: str | None = None
    welcome_message: str | None = None


@dataclass(frozen=True, kw_only=True)
class BankAccount:
    """Immutable bank account value.

    Obtain instances through ``BankAccount.create`` (new accounts) and
    ``BankAccount.update`` (derived accounts). Direct construction is kept for
    store adapters that rehydrate persisted values; it checks the structural
    invariants below and raises ValueError when they are violated.

    Invariants:
        - sort_code is exactly 6 digits
        - account_number is exactly 8 digits
        - balance is never negative
        - id, owner, balance, sort_code and account_number never change
          through update

    Attributes:
        id: Unique account identifier (UUIDv7).
        name: Account display name.
        balance: Current balance, starts at 0.
        owner: Identifier of the account holder.
        sort_code: 6-digit bank sort code.
        account_number: 8-digit account number.
        welcome_message: Optional greeting shown to the holder.
    """

    id: UUID
    name: str
    balance: Decimal
    owner: str
    sort_code: str
    account_number: str
    welcome_message: str | None = None

    def __post_init__(self) -> None:
        """Validate structural invariants.

        Raises:
            ValueError: If sort code, account number or balance is invalid.

        Note:
            These are programming errors, not business logic failures.
            Expected failures come back from create() as Failure values.
        """
        if not _SORT_CODE_PATTERN.fullmatch(self.sort_code):
            raise ValueError(BankAccountError.INVALID_SORT_CODE)

        if not _ACCOUNT_NUMBER_PATTERN.fullmatch(self.account_number):
            raise ValueError(BankAccountError.INVALID_ACCOUNT_NUMBER)

        if self.balance < 0:
            raise ValueError(BankAccountError.NEGATIVE_BALANCE)

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, props: CreateBankAccountProps) -> Result["BankAccount", DomainError]:
        """Open a new bank account.

        Name is checked before owner; the first failing check wins. Only
        presence is checked (None or empty string).

        Args:
            props: Name and owner for the new account.

        Returns:
            Success(BankAccount): New account with zero balance and freshly
                generated id, sort code and account number.
            Failure(ValidationError): INVALID_ACCOUNT_NAME or
                INVALID_ACCOUNT_OWNER.
        """
        if not props.name:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ACCOUNT_NAME,
                    message=BankAccountError.INVALID_ACCOUNT_NAME,
                    field="name",
                )
            )

        if not props.owner:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ACCOUNT_OWNER,
                    message=BankAccountError.INVALID_ACCOUNT_OWNER,
                    field="owner",
                )
            )

        account = cls(
            id=uuid7(),
            name=props.name,
            balance=Decimal("0"),
            owner=props.owner,
            sort_code=generate_sort_code(),
            account_number=generate_account_number(),
        )
        return Success(value=account)

    @staticmethod
    def update(
        account: "BankAccount", props: UpdateBankAccountProps
    ) -> Result["BankAccount", DomainError]:
        """Derive an updated account from an existing one.

        Only name and welcome_message can change. An explicitly empty name is
        applied as given; no re-validation happens here.

        Args:
            account: Current account value.
            props: Fields to change (None keeps the current value).

        Returns:
            Success(BankAccount): New account value.
        """
        updated = replace(
            account,
            name=props.name if props.name is not None else account.name,
            welcome_message=(
                props.welcome_message
                if props.welcome_message is not None
                else account.welcome_message
            ),
        )
        return Success(value=updated)


def generate_sort_code() -> str:
    """Generate a uniformly random 6-digit sort code (100000-999999)."""
    return str(SORT_CODE_MIN + secrets.randbelow(SORT_CODE_MAX - SORT_CODE_MIN + 1))


def generate_account_number() -> str:
    """Generate a uniformly random 8-digit account number (10000000-99999999)."""
    return str(
        ACCOUNT_NUMBER_MIN
        + secrets.randbelow(ACCOUNT_NUMBER_MAX - ACCOUNT_NUMBER_MIN + 1)
    )
