import logging

from nairim.database import transaction
from nairim.models import Lease, Property, PropertyType
from nairim.schemas.property_type import PropertyTypeCreate, PropertyTypeUpdate
from nairim.services.base import Cascade, SoftDeleteService
from nairim.services.query import EntityQuery, SearchProfile, direct, field_mapping, timestamps

logger = logging.getLogger(__name__)

PROPERTY_TYPE_FIELDS = field_mapping(
    description=direct("description"),
    **timestamps(),
)

PROPERTY_TYPE_QUERY = EntityQuery(
    model=PropertyType,
    fields=PROPERTY_TYPE_FIELDS,
    search=SearchProfile(direct=("description",)),
    default_order=(("description", "asc"),),
)


class PropertyTypeService(SoftDeleteService):
    """
    Сервис типов объектов.
    Удаление типа удаляет объекты и договоры этого типа
    """
    entity_name = "PropertyType"
    query = PROPERTY_TYPE_QUERY
    cascades = (
        Cascade(Property, "type_id"),
        Cascade(Lease, "type_id"),
    )

    def create(self, payload: PropertyTypeCreate) -> PropertyType:
        self.ensure_unique("description", payload.description, case_insensitive=True)
        with transaction(self.db):
            property_type = PropertyType(description=payload.description)
            self.db.add(property_type)
        logger.info(f"PropertyType {property_type.id} created: {payload.description}")
        return self.get(property_type.id)

    def update(self, type_id: str, payload: PropertyTypeUpdate) -> PropertyType:
        property_type = self.get(type_id)
        self.ensure_unique("description", payload.description, exclude_id=type_id, case_insensitive=True)
        with transaction(self.db):
            property_type.description = payload.description
        return self.get(type_id)
