import logging
from typing import List

from sqlalchemy import update
from sqlalchemy.orm import selectinload

from nairim.database import transaction
from nairim.models import (
    Agency, Document, Favorite, Owner, Property, PropertyAddress, PropertyType, PropertyValue,
)
from nairim.schemas.property import PropertyCreate, PropertyUpdate, PropertyValueIn
from nairim.models.mixins import utcnow
from nairim.services.base import Cascade, SoftDeleteService
from nairim.services.query import (
    EntityQuery, SearchProfile, ValueType, address_fields, direct, field_mapping, relation, timestamps,
)

logger = logging.getLogger(__name__)

PROPERTY_FIELDS = field_mapping(
    title=direct("title"),
    bedrooms=direct("bedrooms", ValueType.INTEGER),
    bathrooms=direct("bathrooms", ValueType.INTEGER),
    half_bathrooms=direct("half_bathrooms", ValueType.INTEGER),
    garage_spaces=direct("garage_spaces", ValueType.INTEGER),
    area_total=direct("area_total", ValueType.DECIMAL),
    area_built=direct("area_built", ValueType.DECIMAL),
    frontage=direct("frontage", ValueType.DECIMAL),
    furnished=direct("furnished", ValueType.BOOLEAN),
    floor_number=direct("floor_number", ValueType.INTEGER),
    tax_registration=direct("tax_registration"),
    notes=direct("notes"),
    owner_id=direct("owner_id", ValueType.KEY, sortable=False),
    type_id=direct("type_id", ValueType.KEY, sortable=False),
    agency_id=direct("agency_id", ValueType.KEY, sortable=False),
    owner_name=relation("owner.name", facet=True),
    type_description=relation("type.description", facet=True),
    agency_trade_name=relation("agency.trade_name", facet=True),
    **address_fields(facets=("city", "state")),
    **timestamps(),
)

PROPERTY_QUERY = EntityQuery(
    model=Property,
    fields=PROPERTY_FIELDS,
    search=SearchProfile(
        direct=("title", "tax_registration", "notes"),
        relations=("owner.name", "type.description", "agency.trade_name"),
        addresses="addresses",
    ),
    load_options=(
        selectinload(Property.owner),
        selectinload(Property.type),
        selectinload(Property.agency),
        selectinload(Property.addresses).selectinload(PropertyAddress.address),
        selectinload(Property.values),
        selectinload(Property.documents),
    ),
)

PROPERTY_COLUMNS = (
    "owner_id", "type_id", "agency_id", "title", "bedrooms", "bathrooms", "half_bathrooms",
    "garage_spaces", "area_total", "area_built", "frontage", "furnished", "floor_number",
    "tax_registration", "notes",
)


class PropertyService(SoftDeleteService):
    """
    Сервис объектов недвижимости.
    Объект, его адрес и снимок стоимости создаются одной транзакцией
    """
    entity_name = "Property"
    query = PROPERTY_QUERY
    cascades = (
        Cascade(PropertyAddress, "property_id"),
        Cascade(PropertyValue, "property_id"),
        Cascade(Document, "property_id"),
        Cascade(Favorite, "property_id"),
    )

    def _check_references(self, owner_id=None, type_id=None, agency_id=None) -> None:
        self.require(Owner, owner_id, "Owner")
        self.require(PropertyType, type_id, "PropertyType")
        self.require(Agency, agency_id, "Agency")

    def _add_value(self, property_id: str, values: PropertyValueIn) -> None:
        self.db.add(PropertyValue(property_id=property_id, **self.plain(values.model_dump())))

    def create(self, payload: PropertyCreate) -> Property:
        self._check_references(payload.owner_id, payload.type_id, payload.agency_id)

        with transaction(self.db):
            property_obj = Property(**payload.model_dump(include=set(PROPERTY_COLUMNS)))
            self.db.add(property_obj)
            self.db.flush()

            if payload.address is not None:
                self.attach_addresses(PropertyAddress, "property_id", property_obj.id, [payload.address])
            if payload.values is not None:
                self._add_value(property_obj.id, payload.values)

        logger.info(f"Property {property_obj.id} created: {property_obj.title}")
        return self.get(property_obj.id)

    def update(self, property_id: str, payload: PropertyUpdate) -> Property:
        property_obj = self.get(property_id)
        data = payload.model_dump(exclude_unset=True, include=set(PROPERTY_COLUMNS))
        self._check_references(data.get("owner_id"), data.get("type_id"), data.get("agency_id"))

        with transaction(self.db):
            self.apply_changes(property_obj, data)
            if payload.address is not None:
                self.detach_links(PropertyAddress, "property_id", property_id)
                self.attach_addresses(PropertyAddress, "property_id", property_id, [payload.address])
            if payload.values is not None:
                self._add_value(property_id, payload.values)

        logger.info(f"Property {property_id} updated: {sorted(data)}")
        return self.get(property_id)

    def remove_documents(self, property_id: str, document_ids: List[str]) -> int:
        """Мягко удаляет документы объекта, возвращает число удаленных"""
        self.get(property_id)
        if not document_ids:
            return 0
        with transaction(self.db):
            result = self.db.execute(
                update(Document)
                .where(
                    Document.property_id == property_id,
                    Document.id.in_(document_ids),
                    Document.deleted_at.is_(None),
                )
                .values(deleted_at=utcnow())
            )
        logger.info(f"Property {property_id}: {result.rowcount} documents removed")
        return result.rowcount
