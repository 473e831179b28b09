from fastapi import FastAPI

from .bulk_notifications import router as bulk_notifications_router
from .notifications import router as notifications_router
from .providers import router as providers_router
from .recipients import router as recipients_router
from .templates import router as templates_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(bulk_notifications_router)
    app.include_router(notifications_router)
    app.include_router(providers_router)
    app.include_router(recipients_router)
    app.include_router(templates_router)
