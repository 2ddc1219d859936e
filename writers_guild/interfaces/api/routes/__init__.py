from fastapi import FastAPI

from writers_guild.infrastructure.realtime import EventPublisher

from . import collaborations, conversations, engagement, posts, realtime, reports
from .admin import router as admin_router
from .auth import router as auth_router
from .discovery import router as discovery_router
from .health import router as health_router
from .notifications import router as notifications_router
from .users import router as users_router


def register_routes(app: FastAPI, *, publisher: EventPublisher) -> None:
    """Register every API router, binding the realtime services explicitly.

    Routers that notify users are built around ``publisher``; the websocket
    endpoint shares the publisher's broadcaster and connection registry.
    """

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(posts.build_router(publisher))
    app.include_router(engagement.build_router(publisher))
    app.include_router(collaborations.build_router(publisher))
    app.include_router(reports.build_router(publisher))
    app.include_router(notifications_router)
    app.include_router(conversations.build_router(publisher))
    app.include_router(discovery_router)
    app.include_router(admin_router)
    app.include_router(realtime.build_router(publisher.broadcaster))


__all__ = ["register_routes"]
