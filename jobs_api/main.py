# jobs-api\jobs_api\main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from jobs_api.api.v1 import auth, jobs
from jobs_api.core.config import Settings, settings
from jobs_api.core.errors import register_exception_handlers
from jobs_api.core.middleware import SecurityHeadersMiddleware
from jobs_api.core.rate_limit import build_limiter, rate_limit_exceeded_handler
from jobs_api.db.checkdb import verify_database_connection
from jobs_api.db.database import init_db
from jobs_api.security.auth import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to start without a working database
    if not verify_database_connection():
        raise RuntimeError("Database connection failed, see the log for details")
    init_db()
    logger.info(f"Jobs API ready on port {app.state.settings.PORT}")
    yield


def create_app(app_settings: Settings | None = None, run_startup: bool = True) -> FastAPI:
    """
    Builds the application.

    Request stages, outermost first: rate limiter, security headers, CORS,
    then the routers. The jobs router adds the auth gate in front of its handlers.
    """
    app_settings = app_settings or settings
    logging.basicConfig(level=app_settings.LOG_LEVEL)

    # Create a FastAPI instance
    app = FastAPI(
        title="Jobs API",
        description="Track job applications per user account",
        version="1.0.0",
        docs_url="/api-docs",
        lifespan=lifespan if run_startup else None,
    )
    app.state.settings = app_settings
    app.state.token_service = TokenService.from_settings(app_settings)
    app.state.limiter = build_limiter(app_settings)

    register_exception_handlers(app)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # add_middleware wraps, so the last one added runs first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(SlowAPIMiddleware)

    # All endpoints live under /api/v1
    app.include_router(auth.router, prefix="/api/v1")
    app.include_router(jobs.router, prefix="/api/v1")

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def read_root():
        return '<h1>Jobs API</h1><a href="/api-docs">Documentation</a>'

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    # proxy_headers lets the rate limiter see the client IP behind one proxy
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, proxy_headers=True)
