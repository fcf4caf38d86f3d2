"""
Схемы для входа администратора.
"""
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Вход по фиксированной паре логин/пароль."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class Session(BaseModel):
    """Текущая сессия. token отдаётся только при входе (для Bearer-клиентов)."""

    username: str
    token: str | None = None
    expires_in: int | None = None
