# jobs-api\jobs_api\security\auth.py

import logging
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError

from jobs_api.core.config import Settings
from jobs_api.schemas.user import TokenPayload

logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Raised when a token is malformed, badly signed or expired."""


class TokenService:
    """
    Issues and verifies stateless session tokens.

    A token carries the user's id and display name plus an expiry. Nothing is
    stored server-side, so a token stays usable until it expires.
    """

    def __init__(self, secret: str, lifetime: timedelta, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "TokenService":
        return cls(
            secret=app_settings.JWT_SECRET,
            lifetime=timedelta(minutes=app_settings.JWT_LIFETIME_MINUTES),
            algorithm=app_settings.JWT_ALGORITHM,
        )

    def issue(self, user_id: str, name: str) -> str:
        """Creates a signed token for the given user."""
        now = datetime.now(timezone.utc)
        to_encode = {
            "userId": str(user_id),
            "name": name,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """Returns the embedded identity, or raises InvalidTokenError."""
        try:
            # jose checks both the signature and the 'exp' claim
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        user_id = payload.get("userId")
        name = payload.get("name")
        if not isinstance(user_id, str) or not user_id or not isinstance(name, str):
            raise InvalidTokenError("Token payload is missing the user identity")

        return TokenPayload(userId=user_id, name=name)
