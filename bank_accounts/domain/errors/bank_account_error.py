"""Bank account domain errors.

Defines bank-account-specific error message constants. They are paired with
an ErrorCode inside a DomainError and returned in Result types.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from bank_accounts.domain.errors import BankAccountError
    from bank_accounts.core.result import Failure

    if not props.name:
        return Failure(error=ValidationError(
            code=ErrorCode.INVALID_ACCOUNT_NAME,
            message=BankAccountError.INVALID_ACCOUNT_NAME,
            field="name",
        ))
"""


class BankAccountError:
    """Bank account error message constants.

    Error Categories:
        - Validation errors: INVALID_ACCOUNT_NAME, INVALID_ACCOUNT_OWNER
        - Resource errors: ACCOUNT_NOT_FOUND
        - Store errors: CREATE_FAILED, READ_FAILED, UPDATE_FAILED
        - Invariant errors: INVALID_SORT_CODE, INVALID_ACCOUNT_NUMBER,
          NEGATIVE_BALANCE (raised as ValueError on direct construction)
    """

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    INVALID_ACCOUNT_NAME = "Account name cannot be empty or null"
    """Account name is required at creation."""

    INVALID_ACCOUNT_OWNER = "Account owner cannot be empty or null"
    """Account holder is required at creation."""

    # -------------------------------------------------------------------------
    # Resource Errors
    # -------------------------------------------------------------------------

    ACCOUNT_NOT_FOUND = "Bank account not found"
    """Bank account with given ID does not exist."""

    # -------------------------------------------------------------------------
    # Store Errors
    # -------------------------------------------------------------------------

    CREATE_FAILED = "Error creating bank account"
    READ_FAILED = "Error reading bank account"
    UPDATE_FAILED = "Error updating bank account"

    # -------------------------------------------------------------------------
    # Invariant Errors
    # -------------------------------------------------------------------------

    INVALID_SORT_CODE = "Sort code must be exactly 6 digits"
    INVALID_ACCOUNT_NUMBER = "Account number must be exactly 8 digits"
    NEGATIVE_BALANCE = "Balance cannot be negative"
