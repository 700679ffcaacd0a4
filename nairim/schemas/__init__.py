from nairim.schemas.common import (
    PageResponse, page_response, AddressIn, AddressResponse, ContactIn, ContactResponse
)
from nairim.schemas.property import (
    PropertyBase, PropertyCreate, PropertyUpdate, PropertyResponse, PropertyValueIn, DocumentsRemove
)
from nairim.schemas.person import (
    OwnerCreate, OwnerUpdate, OwnerResponse, TenantCreate, TenantUpdate, TenantResponse
)
from nairim.schemas.agency import AgencyCreate, AgencyUpdate, AgencyResponse
from nairim.schemas.lease import LeaseCreate, LeaseUpdate, LeaseResponse
from nairim.schemas.property_type import PropertyTypeCreate, PropertyTypeUpdate, PropertyTypeResponse
from nairim.schemas.user import UserUpdate, UserResponse
from nairim.schemas.favorite import FavoriteCreate, FavoriteResponse, FavoriteCheck
from nairim.schemas.dashboard import (
    MetricResult, ChartData, GeolocationPoint, FinancialMetrics, PortfolioMetrics,
    ClientsMetrics, GeolocationResponse, DashboardResponse
)

__all__ = [
    "PageResponse", "page_response", "AddressIn", "AddressResponse", "ContactIn", "ContactResponse",
    "PropertyBase", "PropertyCreate", "PropertyUpdate", "PropertyResponse", "PropertyValueIn", "DocumentsRemove",
    "OwnerCreate", "OwnerUpdate", "OwnerResponse", "TenantCreate", "TenantUpdate", "TenantResponse",
    "AgencyCreate", "AgencyUpdate", "AgencyResponse",
    "LeaseCreate", "LeaseUpdate", "LeaseResponse",
    "PropertyTypeCreate", "PropertyTypeUpdate", "PropertyTypeResponse",
    "UserUpdate", "UserResponse",
    "FavoriteCreate", "FavoriteResponse", "FavoriteCheck",
    "MetricResult", "ChartData", "GeolocationPoint", "FinancialMetrics", "PortfolioMetrics",
    "ClientsMetrics", "GeolocationResponse", "DashboardResponse",
]
