"""
Конфигурация приложения из переменных окружения.

Один класс Settings (pydantic-settings), все секреты и настройки читаются из .env.
В коде используем только settings.*, не os.getenv.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки из env."""

    # MongoDB: URI из .env, таймауты в миллисекундах
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "portfolio"
    MONGO_TIMEOUT_MS: int = 5000

    # CORS: список origin через запятую в .env
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Rate limit для публичных форм: запросов с одного IP за окно
    RATE_LIMIT: str = "10/minute"
    RATE_LIMITED_PATHS: str = "POST /messages,POST /auth/login"
    # Брать IP из X-Forwarded-For (только если приложение стоит за своим прокси)
    TRUST_FORWARDED_FOR: bool = False

    # Логирование
    LOG_LEVEL: str = "INFO"

    # Сессия администратора (JWT в cookie)
    JWT_SECRET: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_HOURS: int = 24
    SESSION_COOKIE_NAME: str = "auth-token"
    COOKIE_SECURE: bool = False

    # Единственная учётная запись администратора.
    # ADMIN_PASSWORD_HASH (pbkdf2_sha256) имеет приоритет над ADMIN_PASSWORD.
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "password"
    ADMIN_PASSWORD_HASH: str = ""

    # S3 / MinIO для загрузок
    S3_ENDPOINT: str = ""
    S3_ACCESS_KEY: str = ""
    S3_SECRET_KEY: str = ""
    S3_REGION: str = "us-east-1"
    S3_BUCKET: str = "portfolio"
    S3_PUBLIC_URL: str = ""
    S3_TIMEOUT_SECONDS: int = 10

    # Лимит размера изображения (inline base64 и загрузки), 5 МБ
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def cors_list(self) -> list[str]:
        """CORS origins как список для CORSMiddleware."""
        return [x.strip() for x in self.CORS_ORIGINS.split(",") if x.strip()]

    def rate_limited_routes(self) -> set[tuple[str, str]]:
        """RATE_LIMITED_PATHS -> {(METHOD, path)}. Пример: 'POST /messages' -> ('POST', '/messages')."""
        routes = set()
        for entry in self.RATE_LIMITED_PATHS.split(","):
            parts = entry.split()
            if len(parts) == 2:
                routes.add((parts[0].upper(), parts[1].rstrip("/") or "/"))
        return routes

    def rate_limit_parsed(self) -> tuple[int, int]:
        """RATE_LIMIT разобрать в (max_requests, window_seconds). Пример: '10/minute' -> (10, 60)."""
        s = self.RATE_LIMIT.strip().lower().replace(" ", "")
        if "/" not in s:
            return 10, 60
        part, window = s.split("/", 1)
        try:
            max_req = int(part)
        except ValueError:
            return 10, 60
        if window in ("minute", "min", "m"):
            return max_req, 60
        if window in ("hour", "h"):
            return max_req, 3600
        if window in ("second", "sec", "s"):
            return max_req, 1
        return max_req, 60

    def public_url_for(self, key: str) -> str:
        """Публичный URL объекта в бакете."""
        if self.S3_PUBLIC_URL:
            return f"{self.S3_PUBLIC_URL.rstrip('/')}/{key}"
        if self.S3_ENDPOINT:
            return f"{self.S3_ENDPOINT.rstrip('/')}/{self.S3_BUCKET}/{key}"
        return f"https://{self.S3_BUCKET}.s3.{self.S3_REGION}.amazonaws.com/{key}"


# Глобальный экземпляр, импортируй: from app.core.config import settings
settings = Settings()
