"""
Auth Router - RPC facade over the authentication service.

Three unary operations. Request validation failures are reported with
specifics (400); every domain error is collapsed to an opaque internal
error (500) so clients learn nothing about accounts or internals.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ..config import settings
from ..db import SessionLocal
from ..errors import AuthError
from ..schemas import (
    MAX_ID,
    ErrorResponse,
    IsAdminRequest,
    IsAdminResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from ..service import AuthService
from ..storage import Storage

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={
        400: {"description": "Invalid argument", "model": ErrorResponse},
        500: {"description": "Internal error", "model": ErrorResponse},
    },
)
logger = logging.getLogger(__name__)


def get_auth_service() -> AuthService:
    storage = Storage(SessionLocal)
    return AuthService(
        user_saver=storage,
        user_provider=storage,
        app_provider=storage,
        token_ttl=settings.TOKEN_TTL,
    )


def invalid_argument(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def to_http_error(err: AuthError) -> HTTPException:
    """Single conversion point from domain errors to transport status."""
    logger.error("request failed: %s", err, extra={"op": err.op, "kind": err.kind.value})
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal error")


@router.post("/register", response_model=RegisterResponse)
def register(payload: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    if not payload.email:
        raise invalid_argument("the email value is required")
    if not payload.password:
        raise invalid_argument("the password value is required")

    try:
        user_id = auth.register_new_user(payload.email, payload.password)
    except AuthError as e:
        raise to_http_error(e) from e

    return RegisterResponse(user_id=user_id)


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    if not payload.email:
        raise invalid_argument("the email value is required")
    if not payload.password:
        raise invalid_argument("the password value is required")
    if not 0 < payload.app_id <= MAX_ID:
        raise invalid_argument("the app id is required")

    try:
        token = auth.login(payload.email, payload.password, payload.app_id)
    except AuthError as e:
        raise to_http_error(e) from e

    return LoginResponse(token=token)


@router.post("/is-admin", response_model=IsAdminResponse)
def is_admin(payload: IsAdminRequest, auth: AuthService = Depends(get_auth_service)):
    if not 0 < payload.user_id <= MAX_ID:
        raise invalid_argument("the user id is required")

    try:
        result = auth.is_admin(payload.user_id)
    except AuthError as e:
        raise to_http_error(e) from e

    return IsAdminResponse(is_admin=result)
