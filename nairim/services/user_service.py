import logging

from nairim.database import transaction
from nairim.models import Favorite, Gender, Role, User
from nairim.schemas.user import UserUpdate
from nairim.services.base import Cascade, SoftDeleteService
from nairim.services.query import EntityQuery, SearchProfile, ValueType, direct, field_mapping, timestamps

logger = logging.getLogger(__name__)

USER_FIELDS = field_mapping(
    name=direct("name"),
    email=direct("email"),
    birth_date=direct("birth_date", ValueType.DATE),
    gender=direct("gender", ValueType.ENUM, choices=tuple(g.value for g in Gender), facet=True),
    role=direct("role", ValueType.ENUM, choices=tuple(r.value for r in Role), facet=True),
    **timestamps(),
)

USER_QUERY = EntityQuery(
    model=User,
    fields=USER_FIELDS,
    search=SearchProfile(direct=("name", "email", "gender", "role")),
)


class UserService(SoftDeleteService):
    """Сервис пользователей. Создание и пароли в модуле аутентификации"""
    entity_name = "User"
    query = USER_QUERY
    cascades = (Cascade(Favorite, "user_id"),)

    def update(self, user_id: str, payload: UserUpdate) -> User:
        user = self.get(user_id)
        data = payload.model_dump(exclude_unset=True)
        self.ensure_unique("email", data.get("email"), exclude_id=user_id, case_insensitive=True)
        with transaction(self.db):
            self.apply_changes(user, data)
        logger.info(f"User {user_id} updated: {sorted(data)}")
        return self.get(user_id)
