from sqlalchemy.orm import selectinload

from nairim.models import Agency, AgencyAddress, AgencyContact
from nairim.services.base import Cascade
from nairim.services.party import PartyService
from nairim.services.query import (
    EntityQuery, SearchProfile, address_fields, contact_fields, direct, field_mapping, timestamps,
)

AGENCY_COLUMNS = (
    "trade_name", "legal_name", "cnpj", "state_registration", "municipal_registration", "license_number",
)

AGENCY_FIELDS = field_mapping(
    trade_name=direct("trade_name"),
    legal_name=direct("legal_name"),
    cnpj=direct("cnpj"),
    state_registration=direct("state_registration"),
    municipal_registration=direct("municipal_registration"),
    license_number=direct("license_number"),
    **address_fields(facets=("city", "state")),
    **contact_fields(),
    **timestamps(),
)

AGENCY_QUERY = EntityQuery(
    model=Agency,
    fields=AGENCY_FIELDS,
    search=SearchProfile(
        direct=AGENCY_COLUMNS,
        addresses="addresses",
        contacts="contacts",
    ),
    load_options=(
        selectinload(Agency.addresses).selectinload(AgencyAddress.address),
        selectinload(Agency.contacts).selectinload(AgencyContact.contact),
    ),
)


class AgencyService(PartyService):
    """Сервис агентств недвижимости"""
    entity_name = "Agency"
    query = AGENCY_QUERY
    cascades = (
        Cascade(AgencyAddress, "agency_id"),
        Cascade(AgencyContact, "agency_id"),
    )
    address_link = AgencyAddress
    contact_link = AgencyContact
    link_key = "agency_id"
    columns = AGENCY_COLUMNS
    unique_columns = ("cnpj",)
