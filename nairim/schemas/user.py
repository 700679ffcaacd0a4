from typing import Optional
from datetime import date
from pydantic import BaseModel

from nairim.models import Gender, Role
from nairim.schemas.common import TimestampsResponse


class UserUpdate(BaseModel):
    """Изменение профиля. Пароль меняется через модуль аутентификации"""
    name: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None
    gender: Optional[Gender] = None
    role: Optional[Role] = None


class UserResponse(TimestampsResponse):
    name: str
    email: str
    birth_date: Optional[date] = None
    gender: Optional[Gender] = None
    role: Role
