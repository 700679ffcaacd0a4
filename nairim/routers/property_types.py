from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.property_type import PropertyTypeCreate, PropertyTypeUpdate, PropertyTypeResponse
from nairim.services.property_type_service import PropertyTypeService
from nairim.services.query import ListParams

router = APIRouter(prefix="/api/property-types", tags=["property-types"])


@router.get("", response_model=PageResponse[PropertyTypeResponse])
def get_property_types(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список типов объектов с поиском, фильтрами и сортировкой"""
    return page_response(PropertyTypeService(db).list(params))


@router.get("/filters")
def get_property_type_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return PropertyTypeService(db).filter_options()


@router.get("/{type_id}", response_model=PropertyTypeResponse)
def get_property_type(type_id: str, db: Session = Depends(get_db)):
    """Получить тип объекта по ID"""
    return PropertyTypeService(db).get(type_id)


@router.post("", response_model=PropertyTypeResponse, status_code=201)
def create_property_type(payload: PropertyTypeCreate, db: Session = Depends(get_db)):
    """Создать тип объекта"""
    return PropertyTypeService(db).create(payload)


@router.put("/{type_id}", response_model=PropertyTypeResponse)
def update_property_type(type_id: str, payload: PropertyTypeUpdate, db: Session = Depends(get_db)):
    """Обновить тип объекта"""
    return PropertyTypeService(db).update(type_id, payload)


@router.delete("/{type_id}")
def delete_property_type(type_id: str, db: Session = Depends(get_db)):
    """Удалить тип объекта"""
    PropertyTypeService(db).delete(type_id)
    return {"message": "PropertyType deleted", "id": type_id}


@router.patch("/{type_id}/restore", response_model=PropertyTypeResponse)
def restore_property_type(type_id: str, db: Session = Depends(get_db)):
    """Восстановить удаленную запись"""
    return PropertyTypeService(db).restore(type_id)
