import logging
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import selectinload

from nairim.database import transaction
from nairim.exceptions import ConflictError, EntityNotFoundError
from nairim.models import Favorite, Property, User
from nairim.models.mixins import utcnow
from nairim.schemas.favorite import FavoriteCreate
from nairim.services.base import SoftDeleteService
from nairim.services.query import (
    EntityQuery, SearchProfile, ValueType, direct, field_mapping, relation, timestamps,
)

logger = logging.getLogger(__name__)

FAVORITE_FIELDS = field_mapping(
    user_id=direct("user_id", ValueType.KEY, sortable=False),
    property_id=direct("property_id", ValueType.KEY, sortable=False),
    user_name=relation("user.name"),
    user_email=relation("user.email"),
    property_title=relation("property.title"),
    **timestamps(),
)

FAVORITE_QUERY = EntityQuery(
    model=Favorite,
    fields=FAVORITE_FIELDS,
    search=SearchProfile(relations=("user.name", "user.email", "property.title")),
    load_options=(
        selectinload(Favorite.user),
        selectinload(Favorite.property),
    ),
)


class FavoriteService(SoftDeleteService):
    """Избранные объекты пользователей"""
    entity_name = "Favorite"
    query = FAVORITE_QUERY

    def find(self, user_id: str, property_id: str) -> Optional[Favorite]:
        return self.db.scalar(
            select(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.property_id == property_id,
                Favorite.deleted_at.is_(None),
            )
        )

    def create(self, payload: FavoriteCreate) -> Favorite:
        if self.find(payload.user_id, payload.property_id) is not None:
            raise ConflictError(f"Property {payload.property_id} already in favorites")
        self.require(User, payload.user_id, "User")
        self.require(Property, payload.property_id, "Property")

        with transaction(self.db):
            favorite = Favorite(user_id=payload.user_id, property_id=payload.property_id)
            self.db.add(favorite)

        logger.info(f"Favorite {favorite.id} created: user {payload.user_id}, property {payload.property_id}")
        return self.get(favorite.id)

    def remove(self, user_id: str, property_id: str) -> None:
        """Убирает объект из избранного пользователя"""
        if self.find(user_id, property_id) is None:
            raise EntityNotFoundError("Favorite", f"{user_id}/{property_id}")
        with transaction(self.db):
            self.db.execute(
                update(Favorite)
                .where(
                    Favorite.user_id == user_id,
                    Favorite.property_id == property_id,
                    Favorite.deleted_at.is_(None),
                )
                .values(deleted_at=utcnow())
            )
        logger.info(f"Favorite removed: user {user_id}, property {property_id}")

    def restore(self, entity_id: str):
        favorite = self.get(entity_id, include_deleted=True)
        if favorite.deleted_at is not None and self.find(favorite.user_id, favorite.property_id) is not None:
            raise ConflictError(f"Property {favorite.property_id} already in favorites")
        return super().restore(entity_id)
