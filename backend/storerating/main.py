# storerating/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storerating.config import settings
from storerating.core.db import init_db, close_db
from storerating.core.bootstrap import ensure_default_admin
from storerating.core.errors import register_error_handlers

from storerating.api.v1.routers import auth, admin, stores, ratings, owner

logger = logging.getLogger("uvicorn.error")
logger.setLevel(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: connect the database and ensure an admin exists."""
    logger.info("[startup] %s (env=%s)", settings.APP_NAME, settings.env)
    await init_db()
    # Ensure there's a default admin account on first run
    await ensure_default_admin()

    yield

    await close_db()
    logger.info("[shutdown] database connections closed")


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# REST
app.include_router(auth.router, prefix="/api")
app.include_router(admin.router, prefix="/api")
app.include_router(stores.router, prefix="/api")
app.include_router(ratings.router, prefix="/api")
app.include_router(owner.router, prefix="/api")

@app.get("/healthz")
def healthz():
    return {"ok": True}
