"""
Aspiro Career API.

Career recommendations, skill gap analysis, resume optimisation, industry
trends and a career chat assistant, served under settings.api_prefix.

Run with `uvicorn aspiro.main:app`.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from aspiro.api.routes import api_router
from aspiro.core.config import settings
from aspiro.core.cors import CORSHeadersMiddleware, cors_headers
from aspiro.core.database import close_db, init_db
from aspiro.core.exceptions import (
    APIException,
    InternalServerException,
    InvalidInputException,
    UpstreamFailureException,
)
from aspiro.core.logging import RequestIDMiddleware, get_logger, setup_logging
from aspiro.core.rate_limit import limiter

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("starting_app", app_name=settings.app_name, env=settings.environment)
    await init_db()
    logger.info("database_initialized")

    yield

    await close_db()
    logger.info("shutting_down")


def _render(exc: APIException, **kwargs) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), **kwargs)


async def handle_api_exception(request: Request, exc: APIException):
    return _render(exc)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Missing or malformed request fields are a 400, not FastAPI's 422."""
    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return _render(InvalidInputException("Request validation failed", details=details))


async def handle_database_error(request: Request, exc: SQLAlchemyError):
    """Store failures are logged in full and reported without detail."""
    logger.error(
        "database_error",
        exc_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return _render(UpstreamFailureException())


async def handle_unexpected_error(request: Request, exc: Exception):
    """
    Last resort: log everything, return a sanitized 500.

    Starlette runs this handler outside the middleware stack, so the CORS
    headers are added here.
    """
    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        path=request.url.path,
        exc_info=True,
    )
    error = InternalServerException(str(exc) if settings.debug else None)
    return _render(error, headers=cors_headers())


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Career recommendations, skill gap analysis and resume feedback",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(APIException, handle_api_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Added last runs first: preflights are answered before request logging.
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(CORSHeadersMiddleware)

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("aspiro.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
