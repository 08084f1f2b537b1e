"""Bank account request and response schemas.

Pydantic schemas for bank account API endpoints. Includes:
- Request schemas (client -> API)
- Response schemas (API -> client)
- Entity-to-schema conversion

Request fields are optional on purpose: presence is validated by the domain
factory so that a missing name or owner comes back as the domain error kind
rather than a generic 422.
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from bank_accounts.domain.entities.bank_account import (
    BankAccount,
    CreateBankAccountProps,
    UpdateBankAccountProps,
)


# =============================================================================
# Request Schemas
# =============================================================================


class CreateBankAccountRequest(BaseModel):
    """Request body for opening a bank account."""

    name: str | None = Field(
        None, description="Account display name", examples=["Everyday Account"]
    )
    owner: str | None = Field(
        None, description="Account holder identifier", examples=["owner-123"]
    )

    def to_props(self) -> CreateBankAccountProps:
        """Convert to domain creation props."""
        return CreateBankAccountProps(name=self.name, owner=self.owner)


class UpdateBankAccountRequest(BaseModel):
    """Request body for updating a bank account (partial)."""

    name: str | None = Field(None, description="New account display name")
    welcome_message: str | None = Field(None, description="New welcome message")

    def to_props(self) -> UpdateBankAccountProps:
        """Convert to domain update props."""
        return UpdateBankAccountProps(
            name=self.name, welcome_message=self.welcome_message
        )


# =============================================================================
# Response Schemas
# =============================================================================


class BankAccountResponse(BaseModel):
    """Single bank account response.

    Attributes:
        id: Account unique identifier.
        name: Account display name.
        balance: Current balance.
        owner: Account holder identifier.
        sort_code: 6-digit sort code.
        account_number: 8-digit account number.
        welcome_message: Optional welcome message.
    """

    id: UUID = Field(..., description="Account unique identifier")
    name: str = Field(..., description="Account display name")
    balance: Decimal = Field(..., description="Current balance")
    owner: str = Field(..., description="Account holder identifier")
    sort_code: str = Field(..., description="Sort code", examples=["123456"])
    account_number: str = Field(
        ..., description="Account number", examples=["12345678"]
    )
    welcome_message: str | None = Field(None, description="Welcome message")

    @classmethod
    def from_entity(cls, account: BankAccount) -> "BankAccountResponse":
        """Convert domain entity to response schema.

        Args:
            account: BankAccount from the service.

        Returns:
            BankAccountResponse for API response.
        """
        return cls(
            id=account.id,
            name=account.name,
            balance=account.balance,
            owner=account.owner,
            sort_code=account.sort_code,
            account_number=account.account_number,
            welcome_message=account.welcome_message,
        )
