from sqlalchemy.orm import selectinload

from nairim.models import Tenant, TenantAddress, TenantContact
from nairim.services.base import Cascade
from nairim.services.owner_service import PERSON_COLUMNS
from nairim.services.party import PartyService
from nairim.services.query import (
    EntityQuery, SearchProfile, address_fields, contact_fields, direct, field_mapping, timestamps,
)

TENANT_FIELDS = field_mapping(
    name=direct("name"),
    internal_code=direct("internal_code"),
    occupation=direct("occupation", facet=True),
    marital_status=direct("marital_status", facet=True),
    cpf=direct("cpf"),
    cnpj=direct("cnpj"),
    **address_fields(),
    **contact_fields(),
    **timestamps(),
)

TENANT_QUERY = EntityQuery(
    model=Tenant,
    fields=TENANT_FIELDS,
    search=SearchProfile(
        direct=PERSON_COLUMNS,
        addresses="addresses",
        contacts="contacts",
    ),
    load_options=(
        selectinload(Tenant.addresses).selectinload(TenantAddress.address),
        selectinload(Tenant.contacts).selectinload(TenantContact.contact),
    ),
)


class TenantService(PartyService):
    """Сервис арендаторов. Адреса и контакты удаляются вместе с арендатором"""
    entity_name = "Tenant"
    query = TENANT_QUERY
    cascades = (
        Cascade(TenantAddress, "tenant_id"),
        Cascade(TenantContact, "tenant_id"),
    )
    address_link = TenantAddress
    contact_link = TenantContact
    link_key = "tenant_id"
    columns = PERSON_COLUMNS
    unique_columns = ("internal_code", "cpf", "cnpj")
