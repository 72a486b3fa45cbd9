"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes and the /uploads static mount
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.memory import connect_store, close_store, check_store_health
from app.services.listings_service import close_realtor_client
from app.services.upload_service import UPLOADS_ROUTE, ensure_uploads_dir
from app.api import auth, listings, workflows

# Initialize logging first
setup_logging()
logger = get_logger(__name__)

# StaticFiles checks its directory when mounted, so create it up front
uploads_dir = ensure_uploads_dir()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("Starting Closied backend...")

    try:
        validate_settings()
        logger.info("Configuration validated")

        ensure_uploads_dir()
        connect_store()

        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Uploads directory: {uploads_dir}")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    yield

    logger.info("Shutting down Closied backend...")

    try:
        close_realtor_client()
        close_store()
        logger.info("Closied backend shut down")

    except Exception as e:
        logger.error(f"Error during shutdown: {str(e)}", exc_info=True)


app = FastAPI(
    title="Closied Backend",
    description="Listings proxy, user workflows and document uploads",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    if process_time > 5.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path}",
            extra={"process_time": process_time}
        )

    return response


add_exception_handlers(app)

app.include_router(listings.router, tags=["Listings"])
app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(workflows.router, tags=["Workflows"])

app.mount(UPLOADS_ROUTE, StaticFiles(directory=str(uploads_dir)), name="uploads")


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic info."""
    return {
        "name": "Closied API",
        "version": "1.0.0",
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Reports whether the in-memory store is up.
    """
    store_healthy = check_store_health()
    health_status = {
        "status": "healthy" if store_healthy else "unhealthy",
        "timestamp": time.time(),
        "environment": settings.ENVIRONMENT,
        "version": "1.0.0",
        "checks": {
            "store": "healthy" if store_healthy else "unhealthy",
            "realtor_api_key": "configured" if settings.realtor_api_key else "missing",
        }
    }

    status_code = 200 if store_healthy else 503
    return JSONResponse(content=health_status, status_code=status_code)


@app.get("/live", tags=["Health"])
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
