"""
Truckline - Main FastAPI Application.

REST API for managing users, trucks, locations and the orders that tie
them together.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from api.routes import auth, health, locations, orders, trucks, users
from core.domain.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
    PlaceLookupError,
    StoreUnavailableError,
)
from core.infrastructure.database import close_database, init_database
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


# Setup logging
configure_logging(get_app_settings().server.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Truckline - Logistics API",
    description="""
    Users, trucks, locations and orders.

    Features:
    - JWT authentication
    - Locations resolved from Google place IDs
    - Order references checked before every write
    - Order listing filtered by status, paginated, with references expanded
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

# Most specific first; subclasses inherit their parent's status
ERROR_STATUS_CODES = (
    (EntityNotFoundError, 404),
    (ConflictError, 409),
    (AuthenticationError, 401),
    (PlaceLookupError, 502),
    (StoreUnavailableError, 503),
)


def error_body(name: str, message: str, cause=None) -> dict:
    return {"status": "error", "name": name, "message": message, "cause": cause}


def status_code_for(exc: DomainError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Map domain errors to HTTP responses."""
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.name} on {request.url.path}: {exc.message} ({exc.cause})")
    else:
        logger.info(f"{exc.name} on {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.name, exc.message, exc.cause),
        headers=headers,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content=error_body("Internal server error", "Internal server error", str(exc)),
    )


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info("🚀 Truckline API starting up...")
    await init_database()
    logger.info("📚 Swagger UI available at: /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    await close_database()
    logger.info("👋 Truckline API shutting down...")


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(auth.router, prefix="/api/v1/auth", tags=["Auth"])
app.include_router(users.router, prefix="/api/v1/users", tags=["Users"])
app.include_router(trucks.router, prefix="/api/v1/trucks", tags=["Trucks"])
app.include_router(locations.router, prefix="/api/v1/locations", tags=["Locations"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Orders"])


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Truckline - Logistics API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


def run() -> None:
    """Start the server with uvicorn."""
    import uvicorn

    server = get_app_settings().server
    uvicorn.run("api.main:app", host=server.host, port=server.port, log_level=server.log_level.lower())


if __name__ == "__main__":
    run()
