from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.property import DocumentsRemove, PropertyCreate, PropertyResponse, PropertyUpdate
from nairim.services.property_service import PropertyService
from nairim.services.query import ListParams

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("", response_model=PageResponse[PropertyResponse])
def get_properties(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список объектов с поиском, фильтрами и сортировкой"""
    return page_response(PropertyService(db).list(params))


@router.get("/filters")
def get_property_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Значения для фильтров списка объектов"""
    return PropertyService(db).filter_options()


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: str, db: Session = Depends(get_db)):
    """Получить объект по ID"""
    return PropertyService(db).get(property_id)


@router.post("", response_model=PropertyResponse, status_code=201)
def create_property(payload: PropertyCreate, db: Session = Depends(get_db)):
    """Создать объект вместе с адресом и первым снимком стоимости"""
    return PropertyService(db).create(payload)


@router.put("/{property_id}", response_model=PropertyResponse)
def update_property(property_id: str, payload: PropertyUpdate, db: Session = Depends(get_db)):
    """Обновить объект; новые значения стоимости добавляются снимком"""
    return PropertyService(db).update(property_id, payload)


@router.post("/{property_id}/documents/remove")
def remove_property_documents(property_id: str, payload: DocumentsRemove, db: Session = Depends(get_db)):
    """Удалить документы объекта"""
    removed = PropertyService(db).remove_documents(property_id, payload.document_ids)
    return {"message": "Documents removed", "id": property_id, "removed": removed}


@router.delete("/{property_id}")
def delete_property(property_id: str, db: Session = Depends(get_db)):
    """Удалить объект вместе с адресами, стоимостью и документами"""
    PropertyService(db).delete(property_id)
    return {"message": "Property deleted", "id": property_id}


@router.patch("/{property_id}/restore", response_model=PropertyResponse)
def restore_property(property_id: str, db: Session = Depends(get_db)):
    """Восстановить удаленный объект"""
    return PropertyService(db).restore(property_id)
