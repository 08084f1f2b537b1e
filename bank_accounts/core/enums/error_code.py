"""Domain-level error codes (machine-readable).

The enum value is the stable error kind exposed to hosts, so it must never
change once published.

Categories:
- Validation errors (INVALID_*)
- Resource errors (*_NOT_FOUND)
- Infrastructure errors (*_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_ACCOUNT_NAME = "InvalidAccountName"
    INVALID_ACCOUNT_OWNER = "InvalidAccountOwner"

    # Resource errors
    ACCOUNT_NOT_FOUND = "AccountNotFound"

    # Infrastructure errors
    CREATE_FAILED = "CreateFailed"
    READ_FAILED = "ReadFailed"
    UPDATE_FAILED = "UpdateFailed"

    def is_validation_error(self) -> bool:
        """Check if the code is caller-correctable input validation."""
        return self in {ErrorCode.INVALID_ACCOUNT_NAME, ErrorCode.INVALID_ACCOUNT_OWNER}

    def is_infrastructure_error(self) -> bool:
        """Check if the code wraps an unexpected infrastructure fault."""
        return self in {
            ErrorCode.CREATE_FAILED,
            ErrorCode.READ_FAILED,
            ErrorCode.UPDATE_FAILED,
        }
