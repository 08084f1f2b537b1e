"""Infrastructure error types.

Exports:
    InfrastructureError: Base infrastructure error (a DomainError)
    InfrastructureErrorCode: Internal infrastructure failure codes
    StoreError: Bank account store failure
"""

from bank_accounts.infrastructure.errors.infrastructure_error import (
    InfrastructureError,
    InfrastructureErrorCode,
    StoreError,
)

__all__ = ["InfrastructureError", "InfrastructureErrorCode", "StoreError"]
