from pydantic import BaseModel, field_validator

from nairim.schemas.common import TimestampsResponse


class PropertyTypeBase(BaseModel):
    """Базовая схема типа объекта"""
    description: str

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description must not be empty")
        return value


class PropertyTypeCreate(PropertyTypeBase):
    pass


class PropertyTypeUpdate(PropertyTypeBase):
    pass


class PropertyTypeResponse(TimestampsResponse):
    description: str
