import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, settings as default_settings
from app.db.database import Database
from app.api import auth, tweets, users
from app.core.exceptions import (
    CustomHTTPException,
    validation_exception_handler,
    http_exception_handler,
    integrity_error_handler,
    global_exception_handler,
)


logger = logging.getLogger("uvicorn.error")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application around an explicit settings object and database handle."""
    settings = settings or default_settings
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Database URL configured: {bool(settings.DATABASE_URL or settings.POSTGRES_DATABASE)}")
        if settings.AUTO_CREATE_TABLES:
            await database.init_models()
        logger.info(f"Server running on port {settings.PORT}")
        yield
        await database.dispose()

    app = FastAPI(
        title=settings.PROJECT_TITLE,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan
    )
    app.state.db = database
    app.state.settings = settings

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception Handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(CustomHTTPException, http_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # API Routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(tweets.router)

    @app.get("/", include_in_schema=False)
    async def health_check():
        return {
            "status": "healthy",
            "version": settings.PROJECT_VERSION,
            "docs": "/docs"
        }

    return app


app = create_app()
