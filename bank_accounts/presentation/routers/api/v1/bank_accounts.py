"""Bank accounts resource handlers.

Handlers:
    create_bank_account  - POST  /bank-accounts
    get_bank_account     - GET   /bank-accounts/{account_id}
    update_bank_account  - PATCH /bank-accounts/{account_id}

Route functions are plain ``def``: the service is synchronous, so FastAPI
runs them in its thread pool.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse

from bank_accounts.application.services.bank_account_service import (
    BankAccountService,
)
from bank_accounts.core.container import get_bank_account_service
from bank_accounts.core.result import Failure
from bank_accounts.presentation.api.middleware.trace_middleware import get_trace_id
from bank_accounts.presentation.routers.api.v1.errors import ErrorResponseBuilder
from bank_accounts.schemas.bank_account_schemas import (
    BankAccountResponse,
    CreateBankAccountRequest,
    UpdateBankAccountRequest,
)

bank_accounts_router = APIRouter(prefix="/bank-accounts", tags=["Bank Accounts"])


@bank_accounts_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BankAccountResponse,
)
def create_bank_account(
    request: Request,
    body: CreateBankAccountRequest,
    service: BankAccountService = Depends(get_bank_account_service),
) -> BankAccountResponse | JSONResponse:
    """Open a bank account.

    POST /api/v1/bank-accounts -> 201 Created

    Returns:
        BankAccountResponse with the new account.
        JSONResponse with RFC 7807 error on failure.
    """
    result = service.create(body.to_props())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_failure(result, request, get_trace_id())

    return BankAccountResponse.from_entity(result.value)


@bank_accounts_router.get("/{account_id}", response_model=BankAccountResponse)
def get_bank_account(
    request: Request,
    account_id: Annotated[UUID, Path(description="Bank account UUID")],
    service: BankAccountService = Depends(get_bank_account_service),
) -> BankAccountResponse | JSONResponse:
    """Get a bank account.

    GET /api/v1/bank-accounts/{account_id} -> 200 OK
    """
    result = service.read(account_id)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_failure(result, request, get_trace_id())

    return BankAccountResponse.from_entity(result.value)


@bank_accounts_router.patch("/{account_id}", response_model=BankAccountResponse)
def update_bank_account(
    request: Request,
    account_id: Annotated[UUID, Path(description="Bank account UUID")],
    body: UpdateBankAccountRequest,
    service: BankAccountService = Depends(get_bank_account_service),
) -> BankAccountResponse | JSONResponse:
    """Update a bank account's name and/or welcome message.

    PATCH /api/v1/bank-accounts/{account_id} -> 200 OK
    """
    result = service.update(account_id, body.to_props())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_failure(result, request, get_trace_id())

    return BankAccountResponse.from_entity(result.value)
