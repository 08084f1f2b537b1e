"""ASGI application for the bank accounts API.

    uvicorn bank_accounts.main:app
"""

from fastapi import FastAPI

from bank_accounts.core.config import settings
from bank_accounts.presentation.api.middleware import TraceMiddleware
from bank_accounts.presentation.routers.api.v1 import v1_router
from bank_accounts.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)
from bank_accounts.presentation.routers.system import system_router

app = FastAPI(
    title=settings.app_name,
    description="Open, read and update bank accounts",
    version=settings.app_version,
    debug=settings.debug,
)

# Outermost: every log line and error body of a request shares its trace id
app.add_middleware(TraceMiddleware)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
