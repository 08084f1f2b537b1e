"""Errors produced when a store adapter itself breaks.

A store never lets an exception escape: it catches it and returns
``Failure(StoreError)``. The caller-facing ``code`` is the operation's kind
(CreateFailed, ReadFailed, UpdateFailed); ``infrastructure_code`` records
whether the store was reading or writing, for logs and debugging.
"""

from dataclasses import dataclass
from enum import Enum

from bank_accounts.core.enums import ErrorCode
from bank_accounts.core.errors import DomainError


class InfrastructureErrorCode(Enum):
    """Store access mode that failed. Never exposed to callers."""

    STORE_WRITE_ERROR = "store_write_error"
    STORE_READ_ERROR = "store_read_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """DomainError built from an adapter fault.

    Attributes:
        infrastructure_code: Access mode that failed.
        cause: The exception the adapter caught.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    cause: BaseException | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreError(InfrastructureError):
    """Bank account store fault."""

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        *,
        code: ErrorCode,
        message: str,
        infrastructure_code: InfrastructureErrorCode,
    ) -> "StoreError":
        """Wrap ``exc``, keeping it as ``cause`` and summarizing it in details."""
        return cls(
            code=code,
            message=message,
            infrastructure_code=infrastructure_code,
            cause=exc,
            details={"error_type": type(exc).__name__, "error_message": str(exc)},
        )
