"""Иерархия исключений сервисного слоя."""


class NairimError(Exception):
    """Базовое исключение приложения."""


class EntityNotFoundError(NairimError):
    """Запись не найдена или удалена (soft delete)."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ConflictError(NairimError):
    """Нарушение уникальности бизнес-ключа."""


class InvalidEntityStateError(ConflictError):
    """Операция невозможна в текущем состоянии записи."""


class ValidationError(NairimError):
    """Некорректные входные данные."""
