"""FastAPI application entry point.

Run with:
    uvicorn apihub.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apihub.core.config import settings
from apihub.core.container import get_database, get_logger
from apihub.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from apihub.presentation.routers.api.v1 import v1_router
from apihub.presentation.routers.api.v1.errors import register_exception_handlers
from apihub.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    - Startup: log configuration summary
    - Shutdown: dispose the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Discover, test, review and compare public HTTP APIs",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(TraceMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
