from typing import Optional
from pydantic import BaseModel, ConfigDict

from nairim.schemas.common import TimestampsResponse
from nairim.schemas.lease import PropertyBrief


class FavoriteCreate(BaseModel):
    user_id: str
    property_id: str


class UserBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str


class FavoriteResponse(TimestampsResponse):
    """Избранное с краткими данными пользователя и объекта"""
    user_id: str
    property_id: str
    user: Optional[UserBrief] = None
    property: Optional[PropertyBrief] = None


class FavoriteCheck(BaseModel):
    is_favorite: bool
    favorite_id: Optional[str] = None
