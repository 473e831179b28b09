from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notifier.config import get_settings
from notifier.infrastructure.database import engine, initialize_database
from notifier.interfaces.api.dependencies import close_channel_dispatcher
from notifier.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the database tables on startup and release connections on shutdown."""

    initialize_database()
    yield
    close_channel_dispatcher()
    engine.dispose()


def create_app() -> FastAPI:
    """Build and configure the notification API."""

    settings = get_settings()
    app = FastAPI(title="Notifier", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
