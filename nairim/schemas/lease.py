from typing import Optional
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

from nairim.schemas.common import TimestampsResponse
from nairim.schemas.property import OwnerBrief, PropertyTypeBrief


class LeaseBase(BaseModel):
    """Базовая схема договора аренды"""
    contract_number: str
    start_date: date
    end_date: Optional[date] = None
    rent_amount: Decimal
    condo_fee: Optional[Decimal] = None
    property_tax: Optional[Decimal] = None
    extra_charges: Optional[Decimal] = None
    commission_amount: Optional[Decimal] = None
    rent_due_day: int = Field(ge=1, le=31)
    tax_due_day: Optional[int] = Field(default=None, ge=1, le=31)
    condo_due_day: Optional[int] = Field(default=None, ge=1, le=31)


class LeaseCreate(LeaseBase):
    property_id: str
    type_id: str
    owner_id: str
    tenant_id: str


class LeaseUpdate(BaseModel):
    property_id: Optional[str] = None
    type_id: Optional[str] = None
    owner_id: Optional[str] = None
    tenant_id: Optional[str] = None
    contract_number: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    rent_amount: Optional[Decimal] = None
    condo_fee: Optional[Decimal] = None
    property_tax: Optional[Decimal] = None
    extra_charges: Optional[Decimal] = None
    commission_amount: Optional[Decimal] = None
    rent_due_day: Optional[int] = Field(default=None, ge=1, le=31)
    tax_due_day: Optional[int] = Field(default=None, ge=1, le=31)
    condo_due_day: Optional[int] = Field(default=None, ge=1, le=31)


class PropertyBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str


class TenantBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class LeaseResponse(LeaseBase, TimestampsResponse):
    property_id: str
    type_id: str
    owner_id: str
    tenant_id: str
    property: Optional[PropertyBrief] = None
    type: Optional[PropertyTypeBrief] = None
    owner: Optional[OwnerBrief] = None
    tenant: Optional[TenantBrief] = None
