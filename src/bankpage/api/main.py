"""FastAPI application factory."""

from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from bankpage.api.deps import get_db
from bankpage.api.exception_handlers import register_exception_handlers
from bankpage.api.middleware import CorrelationIdMiddleware, RequestLoggingMiddleware
from bankpage.api.routes import banks
from bankpage.common.config import get_settings
from bankpage.common.database import create_engine, create_session_factory
from bankpage.common.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)

    # One engine (and pool) per process, handed to requests via app.state
    engine = create_engine(settings)
    app.state.db_engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info(
        "database_engine_created",
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        query_timeout_seconds=settings.query_timeout_seconds,
    )

    yield

    # Shutdown
    await engine.dispose()
    logger.info("database_engine_disposed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Bank Pager",
        description="Cursor pagination over bank records ordered by update_at",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Middleware: the last one added runs outermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    register_exception_handlers(app)

    # Routes
    app.include_router(banks.router, tags=["banks"])

    @app.get("/health")
    async def health(db: AsyncSession = Depends(get_db)):
        services: dict[str, str] = {}

        try:
            await db.execute(text("SELECT 1"))
            services["postgres"] = "up"
        except Exception:
            logger.warning("health_check_db_failed", exc_info=True)
            services["postgres"] = "down"

        all_up = all(v == "up" for v in services.values())
        return JSONResponse(
            status_code=200 if all_up else 503,
            content={"status": "healthy" if all_up else "unhealthy", "services": services},
        )

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("bankpage.api.main:app", host=settings.host, port=settings.port)
