from sqlalchemy.orm import selectinload

from nairim.models import Owner, OwnerAddress, OwnerContact
from nairim.services.base import Cascade
from nairim.services.party import PartyService
from nairim.services.query import (
    EntityQuery, SearchProfile, address_fields, contact_fields, direct, field_mapping, timestamps,
)

PERSON_COLUMNS = ("name", "internal_code", "occupation", "marital_status", "cpf", "cnpj")

OWNER_FIELDS = field_mapping(
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

OWNER_QUERY = EntityQuery(
    model=Owner,
    fields=OWNER_FIELDS,
    search=SearchProfile(
        direct=PERSON_COLUMNS,
        addresses="addresses",
        contacts="contacts",
    ),
    load_options=(
        selectinload(Owner.addresses).selectinload(OwnerAddress.address),
        selectinload(Owner.contacts).selectinload(OwnerContact.contact),
    ),
)


class OwnerService(PartyService):
    """Сервис собственников"""
    entity_name = "Owner"
    query = OWNER_QUERY
    cascades = (
        Cascade(OwnerAddress, "owner_id"),
        Cascade(OwnerContact, "owner_id"),
    )
    address_link = OwnerAddress
    contact_link = OwnerContact
    link_key = "owner_id"
    columns = PERSON_COLUMNS
    unique_columns = ("internal_code", "cpf", "cnpj")
