"""Error response builder for RFC 7807 Problem Details.

Builds Problem Details responses from failed service Results. The Result's
own status classification (400) is the fallback; known error categories are
mapped to more specific HTTP statuses.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from bank_accounts.core.config import settings
from bank_accounts.core.errors import DomainError, NotFoundError, ValidationError
from bank_accounts.core.result import Failure
from bank_accounts.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Mapping:
        - ValidationError -> 400 Bad Request (with field error entry)
        - NotFoundError -> 404 Not Found
        - Infrastructure error codes -> 500 Internal Server Error
        - Anything else -> the Failure's own status_code

    Example:
        >>> result = service.read(account_id)
        >>> if isinstance(result, Failure):
        ...     return ErrorResponseBuilder.from_failure(result, request, trace_id)
    """

    @staticmethod
    def from_failure(
        failure: Failure[DomainError],
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a failed Result to an RFC 7807 JSON response.

        Args:
            failure: Failed Result from the service.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.

        Returns:
            JSONResponse with RFC 7807 ProblemDetails content.
        """
        error = failure.error
        status_code = ErrorResponseBuilder._get_status_code(
            error, default=failure.status_code
        )

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.kind}",
            title=ErrorResponseBuilder._get_title(status_code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        if isinstance(error, ValidationError):
            problem.errors = [
                ErrorDetail(
                    field=error.field or "unknown",
                    code=error.kind,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def _get_status_code(error: DomainError, *, default: int) -> int:
        """Map a domain error to an HTTP status code.

        Args:
            error: Domain error from the failed Result.
            default: Status to use when no specific mapping applies.

        Returns:
            HTTP status code (400-599)
        """
        if isinstance(error, ValidationError):
            return status.HTTP_400_BAD_REQUEST
        if isinstance(error, NotFoundError):
            return status.HTTP_404_NOT_FOUND
        if error.code.is_infrastructure_error():
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        return default

    @staticmethod
    def _get_title(status_code: int) -> str:
        """Get human-readable title for an HTTP status code."""
        mapping = {
            status.HTTP_400_BAD_REQUEST: "Validation Failed",
            status.HTTP_404_NOT_FOUND: "Resource Not Found",
            status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
        }
        return mapping.get(status_code, "Request Failed")
