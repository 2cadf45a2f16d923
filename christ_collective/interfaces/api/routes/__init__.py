from fastapi import FastAPI

from .auth import router as auth_router
from .campaigns import router as campaigns_router
from .chats import router as chats_router
from .ministries import router as ministries_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(notifications_router)
    app.include_router(posts_router)
    app.include_router(campaigns_router)
    app.include_router(ministries_router)
    app.include_router(chats_router)
