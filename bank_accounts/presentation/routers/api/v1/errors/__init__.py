"""Problem Details rendering for failed results and escaped exceptions."""

from bank_accounts.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from bank_accounts.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from bank_accounts.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
