from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from writers_guild.config import configure_logging, get_settings
from writers_guild.infrastructure.database import engine, initialize_database
from writers_guild.infrastructure.realtime import (
    ConnectionRegistry,
    EventBroadcaster,
    EventPublisher,
)
from writers_guild.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app(
    *,
    registry: ConnectionRegistry | None = None,
    broadcaster: EventBroadcaster | None = None,
    publisher: EventPublisher | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    The realtime services are created here, registry first, and handed to
    the routers explicitly. Callers may pass their own instances to replace
    any of them.
    """

    settings = get_settings()
    configure_logging(settings)

    if publisher is None:
        if broadcaster is None:
            broadcaster = EventBroadcaster(registry or ConnectionRegistry())
        publisher = EventPublisher(broadcaster)

    app = FastAPI(title="Writers Guild API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app, publisher=publisher)
    app.state.publisher = publisher
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
