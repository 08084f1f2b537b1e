"""Problem Details (RFC 7807) response bodies.

Every non-2xx response from the API uses ProblemDetails. ``type`` ends with
the error kind for domain failures (``.../errors/AccountNotFound``) or a
status slug for framework errors (``.../errors/not-found``).
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One rejected input field, e.g. ``name`` with ``InvalidAccountName``."""

    field: str = Field(..., description="Rejected field, dotted for nested locations")
    code: str = Field(..., description="Error kind or validator type")
    message: str = Field(..., description="Why the value was rejected")


class ProblemDetails(BaseModel):
    """RFC 7807 body, plus field errors and the request trace id."""

    type: str = Field(..., description="Problem type URI")
    title: str = Field(..., description="Summary of the problem type")
    status: int = Field(..., description="HTTP status code", examples=[404])
    detail: str = Field(
        ..., description="What went wrong", examples=["Bank account not found"]
    )
    instance: str = Field(..., description="Request path that failed")
    errors: list[ErrorDetail] | None = Field(
        None, description="Per-field errors for rejected input"
    )
    trace_id: str | None = Field(
        None, description="X-Trace-Id of the failed request"
    )
