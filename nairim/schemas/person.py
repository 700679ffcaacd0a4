from typing import Optional, List
from pydantic import BaseModel

from nairim.schemas.common import AddressIn, ContactIn, AddressLinkResponse, ContactLinkResponse, TimestampsResponse


class PersonBase(BaseModel):
    """Общие поля собственника и арендатора"""
    name: str
    internal_code: Optional[str] = None
    occupation: Optional[str] = None
    marital_status: Optional[str] = None
    cpf: Optional[str] = None
    cnpj: Optional[str] = None


class PersonCreate(PersonBase):
    addresses: List[AddressIn] = []
    contacts: List[ContactIn] = []


class PersonUpdate(BaseModel):
    """Поля, не переданные в запросе, не изменяются. Списки заменяются целиком"""
    name: Optional[str] = None
    internal_code: Optional[str] = None
    occupation: Optional[str] = None
    marital_status: Optional[str] = None
    cpf: Optional[str] = None
    cnpj: Optional[str] = None
    addresses: Optional[List[AddressIn]] = None
    contacts: Optional[List[ContactIn]] = None


class PersonResponse(PersonBase, TimestampsResponse):
    addresses: List[AddressLinkResponse] = []
    contacts: List[ContactLinkResponse] = []


class OwnerCreate(PersonCreate):
    pass


class OwnerUpdate(PersonUpdate):
    pass


class OwnerResponse(PersonResponse):
    pass


class TenantCreate(PersonCreate):
    pass


class TenantUpdate(PersonUpdate):
    pass


class TenantResponse(PersonResponse):
    pass
