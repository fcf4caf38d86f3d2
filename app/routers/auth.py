"""
Авторизация администратора: вход по фиксированной паре логин/пароль.

Токен сессии кладётся в httpOnly cookie (и возвращается в теле для Bearer-клиентов).
Выход только очищает cookie: сервер не может отозвать выданный токен раньше срока.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.core.config import settings
from app.core.security import issue_token, require_admin, session_max_age, verify_credentials
from app.schemas.auth import LoginRequest, Session
from app.schemas.common import ErrorResponse, SuccessResponse, error_detail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=SuccessResponse[Session],
    responses={401: {"model": ErrorResponse}},
)
def login(data: LoginRequest, response: Response):
    """Вход. При успехе ставит cookie с токеном на 24 часа."""
    if not verify_credentials(data.username, data.password):
        logger.warning("Failed admin login attempt for %r", data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=error_detail("invalid_credentials", "Invalid credentials"),
        )

    token = issue_token(data.username)
    max_age = session_max_age()
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=max_age,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )
    logger.info("Admin %r logged in", data.username)
    return SuccessResponse(data=Session(username=data.username, token=token, expires_in=max_age))


@router.post("/logout", response_model=SuccessResponse[None])
def logout(response: Response):
    """Выход: удалить cookie."""
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
    )
    return SuccessResponse(data=None)


@router.get(
    "/session",
    response_model=SuccessResponse[Session],
    responses={401: {"model": ErrorResponse}},
)
def current_session(username: str = Depends(require_admin)):
    """Текущий администратор (проверка, жива ли сессия)."""
    return SuccessResponse(data=Session(username=username))
