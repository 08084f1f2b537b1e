"""API v1 routers.

Resources:
    /api/v1/bank-accounts - Bank account management
"""

from fastapi import APIRouter

from bank_accounts.core.config import settings
from bank_accounts.presentation.routers.api.v1.bank_accounts import (
    bank_accounts_router,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(bank_accounts_router)

__all__ = [
    "v1_router",
]
