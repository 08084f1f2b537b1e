"""Error values returned inside Failure results."""

from bank_accounts.core.errors.common_errors import NotFoundError, ValidationError
from bank_accounts.core.errors.domain_error import DomainError

__all__ = ["DomainError", "NotFoundError", "ValidationError"]
