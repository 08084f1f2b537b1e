"""Bank account service.

Single contract exposed to hosts (HTTP routes, CLIs, other services) for
opening, reading and updating bank accounts.

Architecture:
    - Application service (uses domain factory + repository port)
    - Every operation returns Result[BankAccount, DomainError]
    - Failures from the factory or repository are returned untouched;
      the service never invents error kinds of its own

Usage:
    service = BankAccountService(repository=repo, logger=logger)

    result = service.create(CreateBankAccountProps(name="Savings", owner="u1"))
    if isinstance(result, Success):
        account = result.value
"""

import threading
from uuid import UUID

from bank_accounts.core.errors import DomainError
from bank_accounts.core.result import Failure, Result
from bank_accounts.domain.entities.bank_account import (
    BankAccount,
    CreateBankAccountProps,
    UpdateBankAccountProps,
)
from bank_accounts.domain.protocols.bank_account_repository import (
    BankAccountRepository,
)
from bank_accounts.domain.protocols.logger_protocol import LoggerProtocol


class BankAccountService:
    """Orchestrates bank account validation and persistence.

    Dependencies (injected via constructor):
        - BankAccountRepository: Account store
        - LoggerProtocol: Structured logging

    Example:
        >>> service = BankAccountService(repository=repo, logger=logger)
        >>> result = service.read(account_id)
        >>> match result:
        ...     case Success(value=account):
        ...         print(account.name)
        ...     case Failure(error=error):
        ...         print(error.kind)
    """

    def __init__(
        self,
        repository: BankAccountRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            repository: Bank account store.
            logger: Structured logger.
        """
        self._repository = repository
        self._update_locks: dict[UUID, threading.Lock] = {}
        self._update_locks_guard = threading.Lock()
        self._logger = logger.bind(service="bank_account_service")

    def create(self, props: CreateBankAccountProps) -> Result[BankAccount, DomainError]:
        """Open and store a new bank account.

        Args:
            props: Name and owner for the new account.

        Returns:
            Success(BankAccount): Account created and stored.
            Failure(ValidationError): Name or owner missing.
            Failure(StoreError): CREATE_FAILED.
        """
        self._logger.info("Creating bank account", owner=props.owner)

        created = BankAccount.create(props)
        if isinstance(created, Failure):
            self._logger.warning(
                "Bank account validation failed", error_code=created.error.kind
            )
            return created

        account = created.value
        self._logger.info("Saving bank account", account_id=str(account.id))
        return self._repository.create(account)

    def read(self, account_id: UUID) -> Result[BankAccount, DomainError]:
        """Read a bank account by id.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Success(BankAccount): Account found.
            Failure(NotFoundError): ACCOUNT_NOT_FOUND.
            Failure(StoreError): READ_FAILED.
        """
        self._logger.info("Reading bank account", account_id=str(account_id))
        return self._repository.read(account_id)

    def update(
        self, account_id: UUID, props: UpdateBankAccountProps
    ) -> Result[BankAccount, DomainError]:
        """Apply a partial change set to a stored bank account.

        Steps: read current account, derive the updated value, store it.
        The first failing step short-circuits. Updates to the same account
        are serialized so concurrent changes to different fields are not lost.

        Args:
            account_id: Account's unique identifier.
            props: Fields to change.

        Returns:
            Success(BankAccount): Updated account as stored.
            Failure(NotFoundError): ACCOUNT_NOT_FOUND.
            Failure(StoreError): READ_FAILED or UPDATE_FAILED.
        """
        self._logger.info("Updating bank account", account_id=str(account_id))

        with self._lock_for(account_id):
            current = self._repository.read(account_id)
            if isinstance(current, Failure):
                return current

            updated = BankAccount.update(current.value, props)
            if isinstance(updated, Failure):
                return updated

            self._logger.info("Saving bank account", account_id=str(account_id))
            return self._repository.update(account_id, updated.value)

    def _lock_for(self, account_id: UUID) -> threading.Lock:
        with self._update_locks_guard:
            return self._update_locks.setdefault(account_id, threading.Lock())
