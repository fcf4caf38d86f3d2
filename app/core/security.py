"""
Безопасность: сессия единственного администратора.

Токен: подписанный JWT (HS256) с sub=username и exp = now + 24ч.
Хранится в httpOnly cookie, для API-клиентов допускается заголовок Bearer.
Отзыва нет: сессия становится недействительной только по истечении срока.
"""
import hmac
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def hash_password(password: str) -> str:
    """Хешировать пароль (для генерации ADMIN_PASSWORD_HASH)."""
    return pwd_context.hash(password)


def verify_credentials(username: str, password: str) -> bool:
    """Сверить логин/пароль с единственной парой из настроек."""
    user_ok = hmac.compare_digest(username.encode(), settings.ADMIN_USERNAME.encode())
    if settings.ADMIN_PASSWORD_HASH:
        password_ok = pwd_context.verify(password, settings.ADMIN_PASSWORD_HASH)
    else:
        password_ok = hmac.compare_digest(password.encode(), settings.ADMIN_PASSWORD.encode())
    return user_ok and password_ok


def issue_token(username: str, now: datetime | None = None) -> str:
    """Выпустить токен сессии на SESSION_EXPIRE_HOURS часов."""
    now = now or datetime.now(timezone.utc)
    expire = now + timedelta(hours=settings.SESSION_EXPIRE_HOURS)
    payload = {"sub": username, "iat": int(now.timestamp()), "exp": int(expire.timestamp())}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str, now: datetime | None = None) -> str | None:
    """
    Проверить токен. Возвращает username или None.

    Подпись проверяет jose, срок проверяется здесь относительно now,
    так часы можно подменить в тестах.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"verify_exp": False},
        )
    except JWTError:
        return None

    username = payload.get("sub")
    exp = payload.get("exp")
    if not isinstance(username, str) or not username or not isinstance(exp, (int, float)):
        return None

    now = now or datetime.now(timezone.utc)
    if exp <= now.timestamp():
        return None
    return username


def session_max_age() -> int:
    """Время жизни cookie в секундах."""
    return settings.SESSION_EXPIRE_HOURS * 60 * 60


async def require_admin(request: Request, bearer: str | None = Depends(oauth2_scheme)) -> str:
    """
    Dependency для защищённых эндпоинтов: токен из cookie или Bearer.
    Возвращает username администратора, иначе 401 до любых изменений.
    """
    # Просроченная cookie не должна перекрывать валидный Bearer
    username = None
    for token in (request.cookies.get(settings.SESSION_COOKIE_NAME), bearer):
        if token:
            username = verify_token(token)
            if username is not None:
                break
    if username is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "unauthorized", "message": "Not authenticated"},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return username
