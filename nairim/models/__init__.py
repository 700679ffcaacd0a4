from nairim.models.address import Address, Contact
from nairim.models.property_type import PropertyType
from nairim.models.owner import Owner, OwnerAddress, OwnerContact
from nairim.models.tenant import Tenant, TenantAddress, TenantContact
from nairim.models.agency import Agency, AgencyAddress, AgencyContact
from nairim.models.property import Property, PropertyAddress, PropertyValue, PropertyStatus
from nairim.models.document import Document, DocumentType
from nairim.models.lease import Lease
from nairim.models.user import User, Gender, Role
from nairim.models.favorite import Favorite

__all__ = [
    "Address", "Contact",
    "PropertyType",
    "Owner", "OwnerAddress", "OwnerContact",
    "Tenant", "TenantAddress", "TenantContact",
    "Agency", "AgencyAddress", "AgencyContact",
    "Property", "PropertyAddress", "PropertyValue", "PropertyStatus",
    "Document", "DocumentType",
    "Lease",
    "User", "Gender", "Role",
    "Favorite",
]
