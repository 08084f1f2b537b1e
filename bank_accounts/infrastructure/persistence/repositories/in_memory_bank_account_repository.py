"""InMemoryBankAccountRepository - dict-backed BankAccountRepository.

Adapter for hexagonal architecture. Holds the authoritative account
snapshots in a process-local mapping, so all data is lost on restart.

Thread Safety:
    - A single lock guards the mapping (one writer at a time)
    - Required because FastAPI runs sync route functions in a thread pool

Error Handling:
    - Missing ids return Failure(NotFoundError)
    - Unexpected exceptions from the mapping are caught here and returned
      as Failure(StoreError); they never propagate past the repository
"""

import threading
from collections.abc import MutableMapping
from uuid import UUID

from bank_accounts.core.enums import ErrorCode
from bank_accounts.core.errors import DomainError, NotFoundError
from bank_accounts.core.result import Failure, Result, Success
from bank_accounts.domain.entities.bank_account import BankAccount
from bank_accounts.domain.errors.bank_account_error import BankAccountError
from bank_accounts.domain.protocols.logger_protocol import LoggerProtocol
from bank_accounts.infrastructure.errors import InfrastructureErrorCode, StoreError


class InMemoryBankAccountRepository:
    """In-memory implementation of BankAccountRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        _store: Mapping of account id to current account snapshot.
        _lock: Lock serializing access to the mapping.
        _logger: Logger bound with repository context.

    Example:
        >>> repo = InMemoryBankAccountRepository(logger=get_logger())
        >>> repo.create(account)
        >>> result = repo.read(account.id)
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        store: MutableMapping[UUID, BankAccount] | None = None,
    ) -> None:
        """Initialize repository.

        Args:
            logger: Structured logger.
            store: Optional backing mapping (defaults to a new dict).
        """
        self._store: MutableMapping[UUID, BankAccount] = (
            store if store is not None else {}
        )
        self._lock = threading.Lock()
        self._logger = logger.bind(repository="bank_account")

    def create(self, account: BankAccount) -> Result[BankAccount, DomainError]:
        """Store an account under its id, overwriting any existing entry.

        Args:
            account: Account to store.

        Returns:
            Success(BankAccount): The stored account.
            Failure(StoreError): CREATE_FAILED on an unexpected fault.
        """
        self._logger.info("Creating bank account", account_id=str(account.id))

        try:
            with self._lock:
                self._store[account.id] = account
        except Exception as e:
            self._logger.error(
                "Error creating bank account",
                error=e,
                account_id=str(account.id),
            )
            return Failure(
                error=StoreError.from_exception(
                    e,
                    code=ErrorCode.CREATE_FAILED,
                    message=BankAccountError.CREATE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_WRITE_ERROR,
                )
            )

        return Success(value=account)

    def read(self, account_id: UUID) -> Result[BankAccount, DomainError]:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Success(BankAccount): Account found.
            Failure(NotFoundError): ACCOUNT_NOT_FOUND.
            Failure(StoreError): READ_FAILED on an unexpected fault.
        """
        self._logger.info("Reading bank account", account_id=str(account_id))

        try:
            with self._lock:
                account = self._store.get(account_id)
        except Exception as e:
            self._logger.error(
                "Error reading bank account",
                error=e,
                account_id=str(account_id),
            )
            return Failure(
                error=StoreError.from_exception(
                    e,
                    code=ErrorCode.READ_FAILED,
                    message=BankAccountError.READ_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_READ_ERROR,
                )
            )

        if account is None:
            return Failure(error=self._not_found(account_id))

        return Success(value=account)

    def update(
        self, account_id: UUID, account: BankAccount
    ) -> Result[BankAccount, DomainError]:
        """Replace the stored account for an existing id.

        Args:
            account_id: Id of the account to replace.
            account: New account value, stored as-is.

        Returns:
            Success(BankAccount): The stored account.
            Failure(NotFoundError): ACCOUNT_NOT_FOUND.
            Failure(StoreError): UPDATE_FAILED on an unexpected fault.
        """
        self._logger.info("Updating bank account", account_id=str(account_id))

        try:
            with self._lock:
                if account_id not in self._store:
                    return Failure(error=self._not_found(account_id))
                self._store[account_id] = account
        except Exception as e:
            self._logger.error(
                "Error updating bank account",
                error=e,
                account_id=str(account_id),
            )
            return Failure(
                error=StoreError.from_exception(
                    e,
                    code=ErrorCode.UPDATE_FAILED,
                    message=BankAccountError.UPDATE_FAILED,
                    infrastructure_code=InfrastructureErrorCode.STORE_WRITE_ERROR,
                )
            )

        return Success(value=account)

    @staticmethod
    def _not_found(account_id: UUID) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            message=BankAccountError.ACCOUNT_NOT_FOUND,
            resource_type="BankAccount",
            resource_id=str(account_id),
        )
