from typing import Optional, List
from pydantic import BaseModel

from nairim.schemas.common import AddressIn, ContactIn, AddressLinkResponse, ContactLinkResponse, TimestampsResponse


class AgencyBase(BaseModel):
    """Базовая схема агентства"""
    trade_name: str
    legal_name: str
    cnpj: str
    state_registration: Optional[str] = None
    municipal_registration: Optional[str] = None
    license_number: Optional[str] = None


class AgencyCreate(AgencyBase):
    addresses: List[AddressIn] = []
    contacts: List[ContactIn] = []


class AgencyUpdate(BaseModel):
    trade_name: Optional[str] = None
    legal_name: Optional[str] = None
    cnpj: Optional[str] = None
    state_registration: Optional[str] = None
    municipal_registration: Optional[str] = None
    license_number: Optional[str] = None
    addresses: Optional[List[AddressIn]] = None
    contacts: Optional[List[ContactIn]] = None


class AgencyResponse(AgencyBase, TimestampsResponse):
    addresses: List[AddressLinkResponse] = []
    contacts: List[ContactLinkResponse] = []
