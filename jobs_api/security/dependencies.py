# jobs-api\jobs_api\security\dependencies.py

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobs_api.core.errors import UnauthenticatedError
from jobs_api.schemas.user import TokenPayload
from jobs_api.security.auth import InvalidTokenError, TokenService

logger = logging.getLogger(__name__)

AUTHENTICATION_INVALID = "Authentication invalid"

# Bearer scheme; auto_error is off so a missing or malformed header
# produces our own generic 401 instead of FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    """The TokenService built by the app factory from its settings."""
    return request.app.state.token_service


def authenticate(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> TokenPayload:
    """
    Auth gate for protected routes.

    Expects 'Authorization: Bearer <token>'. On success the caller's identity is
    attached to request.state.user and returned. Every failure, whatever the
    cause, surfaces as the same 401 message.
    """
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise UnauthenticatedError(AUTHENTICATION_INVALID)

    try:
        identity = token_service.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.debug(f"Token rejected: {e}")
        raise UnauthenticatedError(AUTHENTICATION_INVALID)

    request.state.user = identity
    return identity

