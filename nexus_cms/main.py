# nexus_cms/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nexus_cms.config import settings
from nexus_cms.database import Database
from nexus_cms.routers import auth, function, upload
from nexus_cms.services.media_storage import MediaStorage, build_storage

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(database: Optional[Database] = None, storage: Optional[MediaStorage] = None) -> FastAPI:
    """Build the API. ``database`` and ``storage`` default to ones built from settings at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(settings.DATABASE_URL)
        db.create_all()
        app.state.database = db
        app.state.storage = storage if storage is not None else build_storage()
        logger.info("Nexus CMS started")
        yield
        db.close()
        logger.info("Nexus CMS stopped")

    app = FastAPI(
        title="Nexus CMS",
        description="Content management API for the Nexus marketing site",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    app.include_router(function.router, prefix="/api/function", tags=["Content"])
    app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(upload.router, prefix="/api/upload", tags=["Upload"])

    @app.get("/")
    def read_root():
        return {
            "message": "Nexus CMS API",
            "version": VERSION,
        }

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "service": "Nexus CMS",
        }

    return app


app = create_app()
