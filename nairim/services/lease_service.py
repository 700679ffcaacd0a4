import logging
from typing import Optional

from sqlalchemy.orm import selectinload

from nairim.database import transaction
from nairim.exceptions import ValidationError
from nairim.models import Lease, Owner, Property, PropertyType, Tenant
from nairim.schemas.lease import LeaseCreate, LeaseUpdate
from nairim.services.base import SoftDeleteService
from nairim.services.query import (
    EntityQuery, SearchProfile, ValueType, direct, field_mapping, relation, timestamps,
)

logger = logging.getLogger(__name__)

LEASE_FIELDS = field_mapping(
    contract_number=direct("contract_number"),
    start_date=direct("start_date", ValueType.DATE),
    end_date=direct("end_date", ValueType.DATE),
    rent_amount=direct("rent_amount", ValueType.DECIMAL),
    condo_fee=direct("condo_fee", ValueType.DECIMAL),
    property_tax=direct("property_tax", ValueType.DECIMAL),
    extra_charges=direct("extra_charges", ValueType.DECIMAL),
    commission_amount=direct("commission_amount", ValueType.DECIMAL),
    rent_due_day=direct("rent_due_day", ValueType.INTEGER),
    tax_due_day=direct("tax_due_day", ValueType.INTEGER),
    condo_due_day=direct("condo_due_day", ValueType.INTEGER),
    property_id=direct("property_id", ValueType.KEY, sortable=False),
    owner_id=direct("owner_id", ValueType.KEY, sortable=False),
    tenant_id=direct("tenant_id", ValueType.KEY, sortable=False),
    type_id=direct("type_id", ValueType.KEY, sortable=False),
    property_title=relation("property.title"),
    type_description=relation("type.description", facet=True),
    owner_name=relation("owner.name", facet=True),
    tenant_name=relation("tenant.name", facet=True),
    **timestamps(),
)

LEASE_QUERY = EntityQuery(
    model=Lease,
    fields=LEASE_FIELDS,
    search=SearchProfile(
        direct=("contract_number",),
        relations=("property.title", "type.description", "owner.name", "tenant.name"),
    ),
    load_options=(
        selectinload(Lease.property),
        selectinload(Lease.type),
        selectinload(Lease.owner),
        selectinload(Lease.tenant),
    ),
)


class LeaseService(SoftDeleteService):
    """Сервис договоров аренды"""
    entity_name = "Lease"
    query = LEASE_QUERY

    def _check(self, data: dict, exclude_id: Optional[str] = None) -> None:
        self.ensure_unique("contract_number", data.get("contract_number"), exclude_id=exclude_id)
        self.require(Property, data.get("property_id"), "Property")
        self.require(PropertyType, data.get("type_id"), "PropertyType")
        self.require(Owner, data.get("owner_id"), "Owner")
        self.require(Tenant, data.get("tenant_id"), "Tenant")

    @staticmethod
    def _check_dates(start_date, end_date) -> None:
        if start_date and end_date and end_date < start_date:
            raise ValidationError("end_date must not be earlier than start_date")

    def create(self, payload: LeaseCreate) -> Lease:
        data = payload.model_dump()
        self._check(data)
        self._check_dates(payload.start_date, payload.end_date)

        with transaction(self.db):
            lease = Lease(**data)
            self.db.add(lease)

        logger.info(f"Lease {lease.id} created: contract {payload.contract_number}")
        return self.get(lease.id)

    def update(self, lease_id: str, payload: LeaseUpdate) -> Lease:
        lease = self.get(lease_id)
        data = payload.model_dump(exclude_unset=True)
        self._check(data, exclude_id=lease_id)
        self._check_dates(data.get("start_date", lease.start_date), data.get("end_date", lease.end_date))

        with transaction(self.db):
            self.apply_changes(lease, data)

        logger.info(f"Lease {lease_id} updated: {sorted(data)}")
        return self.get(lease_id)
