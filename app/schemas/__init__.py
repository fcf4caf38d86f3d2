# schemas: Pydantic-модели для запроса/ответа API. Валидация и сериализация из коробки.
from app.schemas.common import ErrorResponse, ListResponse, SuccessResponse

__all__ = ["SuccessResponse", "ListResponse", "ErrorResponse"]
