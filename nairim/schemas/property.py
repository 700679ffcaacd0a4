from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict

from nairim.models import PropertyStatus, DocumentType
from nairim.schemas.common import AddressIn, AddressLinkResponse, TimestampsResponse


class PropertyValueIn(BaseModel):
    """Снимок финансовых показателей"""
    reference_date: Optional[date] = None
    purchase_value: Optional[Decimal] = None
    rental_value: Optional[Decimal] = None
    condo_fee: Optional[Decimal] = None
    property_tax: Optional[Decimal] = None
    sale_value: Optional[Decimal] = None
    extra_charges: Optional[Decimal] = None
    sale_date: Optional[date] = None
    status: PropertyStatus = PropertyStatus.AVAILABLE
    notes: Optional[str] = None


class PropertyValueResponse(PropertyValueIn):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime


class PropertyBase(BaseModel):
    """Базовая схема объекта недвижимости"""
    title: str
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    half_bathrooms: Optional[int] = None
    garage_spaces: Optional[int] = None
    area_total: Optional[float] = None
    area_built: Optional[float] = None
    frontage: Optional[float] = None
    furnished: Optional[bool] = None
    floor_number: Optional[int] = None
    tax_registration: Optional[str] = None
    notes: Optional[str] = None


class PropertyCreate(PropertyBase):
    """Схема для создания объекта вместе с адресом и первым снимком стоимости"""
    owner_id: str
    type_id: str
    agency_id: Optional[str] = None
    address: Optional[AddressIn] = None
    values: Optional[PropertyValueIn] = None


class PropertyUpdate(BaseModel):
    """Схема для обновления объекта. values добавляет новый снимок"""
    owner_id: Optional[str] = None
    type_id: Optional[str] = None
    agency_id: Optional[str] = None
    title: Optional[str] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    half_bathrooms: Optional[int] = None
    garage_spaces: Optional[int] = None
    area_total: Optional[float] = None
    area_built: Optional[float] = None
    frontage: Optional[float] = None
    furnished: Optional[bool] = None
    floor_number: Optional[int] = None
    tax_registration: Optional[str] = None
    notes: Optional[str] = None
    address: Optional[AddressIn] = None
    values: Optional[PropertyValueIn] = None


class OwnerBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class PropertyTypeBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    description: str


class AgencyBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    trade_name: str


class DocumentResponse(BaseModel):
    """Метаданные документа объекта"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    file_path: str
    file_type: Optional[str] = None
    description: Optional[str] = None
    type: DocumentType
    created_at: datetime


class DocumentsRemove(BaseModel):
    document_ids: List[str]


class PropertyResponse(PropertyBase, TimestampsResponse):
    """Схема ответа с объектом недвижимости"""
    owner_id: str
    type_id: str
    agency_id: Optional[str] = None
    owner: Optional[OwnerBrief] = None
    type: Optional[PropertyTypeBrief] = None
    agency: Optional[AgencyBrief] = None
    addresses: List[AddressLinkResponse] = []
    values: List[PropertyValueResponse] = []
    documents: List[DocumentResponse] = []
