import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from vendor_app.api.dependencies import close_backends
from vendor_app.api.routers.dashboard import router as dashboard_router
from vendor_app.api.routers.health import router as health_router
from vendor_app.api.routers.order_forms import router as order_forms_router
from vendor_app.api.routers.orders import router as orders_router
from vendor_app.domain.errors import (
    ApiError,
    AuthError,
    DomainError,
    FormSessionNotFoundError,
    InvalidTransitionError,
    NetworkError,
    OrderNotCancellableError,
    ReadOnlyLocationError,
    ReorderNotAllowedError,
    RequestTimeoutError,
    ValidationError,
)

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

_CONFLICT_ERRORS = (
    InvalidTransitionError,
    ReadOnlyLocationError,
    ReorderNotAllowedError,
    OrderNotCancellableError,
)


def status_for(exc: DomainError) -> int:
    """HTTP status returned to clients for a domain error."""
    if isinstance(exc, ValidationError):
        return 422
    if isinstance(exc, _CONFLICT_ERRORS):
        return 409
    if isinstance(exc, FormSessionNotFoundError):
        return 404
    if isinstance(exc, AuthError):
        return 401
    if isinstance(exc, RequestTimeoutError):
        return 504
    if isinstance(exc, NetworkError):
        return 503
    if isinstance(exc, ApiError):
        return 502
    return 400


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Close the HTTP client of the real backend gateway
    await close_backends()

app = FastAPI(
    title="Vendor Order Console API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    status_code = status_for(exc)
    content = {"detail": exc.message, "code": exc.code}
    if isinstance(exc, ApiError):
        content["detail"] = exc.user_message()
    if isinstance(exc, ValidationError):
        content["field"] = exc.field

    logger.info(
        "Domain error returned to client",
        extra={"path": request.url.path, "code": exc.code, "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content=content)


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(dashboard_router, prefix="/api/v1", tags=["Dashboard"])
app.include_router(orders_router, prefix="/api/v1", tags=["Orders"])
app.include_router(order_forms_router, prefix="/api/v1", tags=["Order Forms"])
