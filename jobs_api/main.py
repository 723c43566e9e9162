"""Application factory and command line entry point for the job board API."""

import argparse
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from jobs_api.core.config import Settings
from jobs_api.database import build_engine, check_connection, init_schema, make_session_factory
from jobs_api.outcomes import internal_error
from jobs_api.routers import jobs
from jobs_api.schemas import Health

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    check_connection(engine)
    init_schema(engine)
    yield
    engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around its own connection pool.

    Args:
        settings: Configuration to use; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Job Board API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = make_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(jobs.router, prefix="/api", tags=["jobs"])

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        logger.error(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return internal_error()

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return internal_error()

    @app.get("/health", response_model=Health)
    async def health():
        return Health()

    return app


def main():
    """Run the API server."""
    parser = argparse.ArgumentParser(description='Job Board API')
    parser.add_argument('--host', help='Interface to bind (default: API_HOST)')
    parser.add_argument('--port', type=int, help='Port to listen on (default: PORT or 10000)')
    parser.add_argument('--reload', action='store_true', help='Reload on code changes')

    args = parser.parse_args()

    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    host = args.host or settings.API_HOST
    port = args.port or settings.PORT

    logger.info(f"Server running on port {port}")
    uvicorn.run(
        "jobs_api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
