"""Registration, login and current-user endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from healthwallet.core.dependencies import get_auth_service, get_current_user
from healthwallet.core.exceptions import EmailAlreadyRegisteredError
from healthwallet.models import User
from healthwallet.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserOut,
)
from healthwallet.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Create an account and return a token for it."""
    try:
        user, token = auth_service.register(payload.name, payload.email, payload.password)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserOut.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    result = auth_service.login(payload.email, payload.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    user, token = result
    return AuthResponse(
        message="Login successful", token=token, user=UserOut.model_validate(user)
    )


@router.get("/me", response_model=MeResponse)
async def me(current_user: User = Depends(get_current_user)):
    return MeResponse(user=UserOut.model_validate(current_user))
