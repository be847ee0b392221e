# jobs-api\jobs_api\api\v1\auth.py

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobs_api.db.database import get_db
from jobs_api.schemas.user import (
    RegisterRequest, LoginRequest, RegisterResponse, LoginResponse, UserSummary, UserName,
)
from jobs_api.security.auth import TokenService
from jobs_api.security.dependencies import get_token_service
from jobs_api.services import accounts

# Registration and login are public: no auth gate on this router
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    """Creates an account and returns its public summary with a session token."""
    user, token = accounts.register_user(db, token_service, data)
    return RegisterResponse(user=UserSummary.model_validate(user), token=token)


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service),
):
    """Exchanges email and password for a session token. The response carries only the name."""
    user, token = accounts.login_user(db, token_service, data)
    return LoginResponse(user=UserName.model_validate(user), token=token)
