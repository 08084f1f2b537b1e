"""BankAccountRepository protocol for bank account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

Unlike a plain finder returning None, every operation returns a Result so
that store faults reach callers as data: implementations catch unexpected
exceptions and return Failure(InfrastructureError) instead of raising.
"""

from typing import Protocol
from uuid import UUID

from bank_accounts.core.errors import DomainError
from bank_accounts.core.result import Result
from bank_accounts.domain.entities.bank_account import BankAccount


class BankAccountRepository(Protocol):
    """Bank account repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        create: Store a new account (overwrites an existing id)
        read: Retrieve account by ID
        update: Replace an existing account

    Example Implementation:
        >>> class SqlBankAccountRepository:
        ...     def read(self, account_id: UUID) -> Result[BankAccount, DomainError]:
        ...         # Database logic here
        ...         pass
    """

    def create(self, account: BankAccount) -> Result[BankAccount, DomainError]:
        """Store an account under its id.

        An existing entry with the same id is silently overwritten.

        Args:
            account: Account to store.

        Returns:
            Success(BankAccount): The stored account.
            Failure(InfrastructureError): CREATE_FAILED on a store fault.
        """
        ...

    def read(self, account_id: UUID) -> Result[BankAccount, DomainError]:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Success(BankAccount): Account found.
            Failure(NotFoundError): ACCOUNT_NOT_FOUND.
            Failure(InfrastructureError): READ_FAILED on a store fault.
        """
        ...

    def update(
        self, account_id: UUID, account: BankAccount
    ) -> Result[BankAccount, DomainError]:
        """Replace the stored account for an existing id.

        The supplied value is stored as-is; no fields are merged.

        Args:
            account_id: Id of the account to replace.
            account: New account value.

        Returns:
            Success(BankAccount): The stored account.
            Failure(NotFoundError): ACCOUNT_NOT_FOUND.
            Failure(InfrastructureError): UPDATE_FAILED on a store fault.
        """
        ...
