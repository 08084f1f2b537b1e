"""Success/Failure outcome values.

Every bank account operation returns ``Result[BankAccount, DomainError]``:
exactly one of a payload or an error, never both. Callers branch with
``isinstance`` or pattern matching::

    match service.read(account_id):
        case Success(value=account):
            ...
        case Failure(error=error):
            log.warning("read failed", kind=error.kind)

``status_code``/``status`` give a coarse default classification (200 /
"Success", 400 / "Error"). The HTTP layer refines failures to 404 or 500
by error type.
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")

SUCCESS_STATUS_CODE = 200
FAILURE_STATUS_CODE = 400


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation completed; ``value`` is the payload."""

    value: T

    @property
    def status_code(self) -> int:
        return SUCCESS_STATUS_CODE

    @property
    def status(self) -> str:
        return "Success"


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation failed; ``error`` describes why."""

    error: E

    @property
    def status_code(self) -> int:
        return FAILURE_STATUS_CODE

    @property
    def status(self) -> str:
        return "Error"


Result: TypeAlias = Success[T] | Failure[E]
