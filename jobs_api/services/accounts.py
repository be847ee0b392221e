# jobs-api\jobs_api\services\accounts.py

import logging

from sqlalchemy.orm import Session

from jobs_api.core.errors import BadRequestError, DuplicateEmailError, UnauthenticatedError
from jobs_api.db.models import User
from jobs_api.schemas.user import RegisterRequest, LoginRequest
from jobs_api.security.auth import TokenService
from jobs_api.security.passwords import hash_password, verify_password
from jobs_api.services.validation import neutralise_markup, validate_registration

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid Credentials"


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, token_service: TokenService, data: RegisterRequest) -> tuple[User, str]:
    """
    Creates a credential record and issues a token for it.
    The password is stored only as a salted bcrypt hash.
    """
    name = neutralise_markup(data.name)
    validate_registration(name, data.email, data.password)

    if get_user_by_email(db, data.email):
        raise DuplicateEmailError()

    new_user = User(
        name=name,
        email=data.email,
        password_hash=hash_password(data.password),
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user) # Load the generated id and timestamps

    logger.info(f"Registered user {new_user.id}")
    return new_user, token_service.issue(new_user.id, new_user.name)


def login_user(db: Session, token_service: TokenService, data: LoginRequest) -> tuple[User, str]:
    """
    Checks an email/password pair and issues a token.
    An unknown email and a wrong password fail with the same error.
    """
    if not data.email or not data.password:
        raise BadRequestError("Please provide email and password")

    user = get_user_by_email(db, data.email)
    if not user or not verify_password(data.password, user.password_hash):
        logger.info("Login rejected")
        raise UnauthenticatedError(INVALID_CREDENTIALS)

    logger.info(f"User {user.id} logged in")
    return user, token_service.issue(user.id, user.name)
