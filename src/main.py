# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import settings
from src.store import AuthorizationStore

logger = logging.getLogger(__name__)


def build_store() -> AuthorizationStore:
    """Create the application's store and wire up persistence.

    With persistence enabled the last snapshot is restored (or the seed
    data is written on first run) and a snapshot is saved after every
    mutation. Without it the store is seeded in memory only.
    """
    from src.services.rbac_seed_service import seed_store

    store = AuthorizationStore()

    if not settings.persist_state:
        seed_store(store)
        return store

    from src.database import SessionLocal, engine
    from src.models import Base
    from src.services import snapshot_service

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        snapshot_service.restore_or_seed(db, store)
    finally:
        db.close()

    snapshot_service.attach_persistence(store, SessionLocal)
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    if app.state.store is None:
        logger.info("Initializing authorization store...")
        app.state.store = build_store()

    yield

    logger.info("Shutting down")


def create_app(store: AuthorizationStore | None = None) -> FastAPI:
    """Compose the application around a store.

    Args:
        store: Store to serve. If omitted, one is built at startup.
    """
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Role-based access control administration",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    from src.api.v1.router import api_router

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
