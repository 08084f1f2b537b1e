"""DomainError: the error payload carried by ``Failure``.

Errors in this service are values. Factories, the store and the service
return them inside a Result and never raise them, so DomainError is a frozen
dataclass rather than an Exception subclass. Layers that need more context
subclass it (ValidationError adds ``field``, StoreError adds ``cause``).
"""

from dataclasses import dataclass
from typing import Any

from bank_accounts.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Structured failure description.

    Attributes:
        code: ErrorCode; its value is the stable kind hosts switch on.
        message: Text suitable for showing to a caller.
        details: Extra debugging data, if any.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    @property
    def kind(self) -> str:
        return self.code.value

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"
