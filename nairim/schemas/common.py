from typing import Any, Dict, Generic, List, Optional, TypeVar
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from nairim.services.query import Page

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """Страница списка: записи, общее количество и число страниц"""
    model_config = ConfigDict(populate_by_name=True)

    data: List[T]
    count: int
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")


def page_response(page: Page) -> Dict[str, Any]:
    return {
        "data": page.data,
        "count": page.count,
        "totalPages": page.total_pages,
        "currentPage": page.current_page,
    }


class AddressIn(BaseModel):
    """Адрес во входных данных"""
    zip_code: Optional[str] = None
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    block: Optional[str] = None
    lot: Optional[str] = None
    district: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: str = "Brasil"


class AddressResponse(AddressIn):
    model_config = ConfigDict(from_attributes=True)

    id: str


class AddressLinkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    address: AddressResponse


class ContactIn(BaseModel):
    """Контакт во входных данных"""
    contact: Optional[str] = None
    phone: Optional[str] = None
    cellphone: Optional[str] = None
    email: Optional[str] = None
    whatsapp: Optional[str] = None


class ContactResponse(ContactIn):
    model_config = ConfigDict(from_attributes=True)

    id: str


class ContactLinkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    contact: ContactResponse


class TimestampsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
