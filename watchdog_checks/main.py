import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from watchdog_checks.config.settings import settings
from watchdog_checks.core.database import create_tables, engine
from watchdog_checks.core.errors import ApiError
from watchdog_checks.core.log import setup_logging
from watchdog_checks.core.messages import ErrorMessages
from watchdog_checks.routes import checks

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("=" * 60)
    logger.info("Watchdog Checks API starting up...")
    logger.info("Debug mode: %s", settings.debug_mode)
    logger.info("Database: %s:%s/%s", settings.db.HOST, settings.db.PORT, settings.db.NAME)
    logger.info("=" * 60)

    if settings.db.CREATE_TABLES:
        await create_tables()
        logger.info("Database tables ensured")

    yield  # App is running

    # Shutdown
    await engine.dispose()
    logger.info("Watchdog Checks API shut down")


app = FastAPI(
    title="Watchdog Check Ingestion Service",
    version="1.0.0",
    description="""
    Stores check results reported by the monitor-execution process
    and serves the check history of a single monitor or of a whole team.
    """,
    debug=settings.debug_mode,
    lifespan=lifespan,
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.__cause__ or exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "msg": exc.msg},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "msg": ErrorMessages.INTERNAL},
    )


app.include_router(checks.router, prefix="/api/v1")


@app.get("/health", tags=["System"])
async def health_check():
    return {"status": "ok", "service": "watchdog-checks"}
