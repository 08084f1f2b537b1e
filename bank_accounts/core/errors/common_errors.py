"""DomainError subclasses shared by every layer.

ValidationError names the input field a caller must correct; NotFoundError
names the missing resource. Both are returned as
``Failure(error=...)``, e.g. the bank account factory rejecting an empty
name returns ``ValidationError(code=ErrorCode.INVALID_ACCOUNT_NAME, ...,
field="name")``.
"""

from dataclasses import dataclass

from bank_accounts.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Caller input rejected; ``field`` is the offending input, if known."""

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Lookup by id found nothing.

    Attributes:
        resource_type: Entity name, e.g. ``"BankAccount"``.
        resource_id: The id that was looked up, as a string.
    """

    resource_type: str
    resource_id: str
