# jobs-api\jobs_api\core\rate_limit.py

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from jobs_api.core.config import Settings

logger = logging.getLogger(__name__)

RATE_LIMITED_MESSAGE = "Too many requests, please try again later."


def build_limiter(app_settings: Settings) -> Limiter:
    """Creates a per-IP limiter applying one window to every route."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[app_settings.rate_limit_rule],
        enabled=app_settings.RATE_LIMIT_ENABLED,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"msg": RATE_LIMITED_MESSAGE},
    )
