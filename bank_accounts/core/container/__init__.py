"""Container module - Centralized dependency injection.

Composition root: every process-wide default implementation is chosen here
once, from settings, and handed to dependents through constructors (or
FastAPI ``Depends``).

    from bank_accounts.core.container import get_bank_account_service

The container is organized into modules:
- infrastructure: Core services (logging)
- repositories: Repository factories
- services: Application service factories
"""

from bank_accounts.core.container.infrastructure import get_logger
from bank_accounts.core.container.repositories import get_bank_account_repository
from bank_accounts.core.container.services import get_bank_account_service

__all__ = [
    "get_bank_account_repository",
    "get_bank_account_service",
    "get_logger",
]
