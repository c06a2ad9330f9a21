"""
Book Catalog API Application

Builds the FastAPI app: logging, CORS, the users and books routers under
the /api prefix, the welcome route, and the handlers that turn every
failure into an envelope.

Notes:
======

1. create_app() builds the app; `app` below is the instance uvicorn serves

2. The lifespan only logs startup and shutdown; the schema is managed
   by Alembic

3. Exception Handlers
   - Every outcome is rendered as the uniform envelope:
     {success, message?, data?, errors?, count?, error?}
   - APIError: anticipated failures raised by the request pipeline
   - HTTPException: unmatched routes become "Route <path> not found"
   - Exception: anything else is logged and hidden in production
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.exceptions import APIError, RouteNotFoundError
from app.routers import books_router, users_router
from app.schemas import Envelope, failure_envelope

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


def envelope_response(
    status_code: int,
    envelope: Envelope,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Serialize an envelope without its absent keys."""
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def _error_detail(exc: Exception | str | None) -> str | None:
    """Raw error text, withheld in production."""
    if settings.is_production or exc is None:
        return None
    return str(exc)


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

A catalog of books with public reads and token-gated writes.

### Authentication
Register or log in under `/api/users` to receive a bearer token, then send
`Authorization: Bearer <token>` with create, update and delete requests.
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        """Render an anticipated pipeline failure."""
        return envelope_response(
            exc.status_code,
            failure_envelope(
                exc.message,
                errors=exc.errors,
                error=_error_detail(exc.detail),
            ),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Render framework-level parameter validation as a 400 envelope."""
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        return envelope_response(
            status.HTTP_400_BAD_REQUEST,
            failure_envelope("Validation failed", errors=errors),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Unmatched routes and other transport-level HTTP errors."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            path = request.url.path
            if request.url.query:
                path = f"{path}?{request.url.query}"
            route_error = RouteNotFoundError(path)
            return envelope_response(
                route_error.status_code,
                failure_envelope(route_error.message),
            )
        return envelope_response(
            exc.status_code,
            failure_envelope(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Database errors raised outside the book store.

        Logs the actual error while hiding details from users in production.
        """
        logger.error(f"Database error: {exc}")
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            failure_envelope("Server error occurred", error=_error_detail(exc)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for unanticipated failures."""
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        return envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            failure_envelope("Internal Server Error", error=_error_detail(exc)),
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and a map of the available endpoints.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        prefix = settings.api_prefix
        return {
            "success": True,
            "message": f"Welcome to {settings.app_name}",
            "endpoints": {
                "users": {
                    "register": f"POST {prefix}/users/register",
                    "login": f"POST {prefix}/users/login",
                    "profile": f"GET {prefix}/users/profile (Protected)",
                },
                "books": {
                    "getAll": f"GET {prefix}/books",
                    "getById": f"GET {prefix}/books/:id",
                    "create": f"POST {prefix}/books (Protected)",
                    "update": f"PUT {prefix}/books/:id (Protected)",
                    "delete": f"DELETE {prefix}/books/:id (Protected)",
                },
            },
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app
app = create_app()


# In production, use: uvicorn app.main:app --host 0.0.0.0 --port 5000
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
