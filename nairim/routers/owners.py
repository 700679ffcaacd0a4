from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.person import OwnerCreate, OwnerUpdate, OwnerResponse
from nairim.services.owner_service import OwnerService
from nairim.services.query import ListParams

router = APIRouter(prefix="/api/owners", tags=["owners"])


@router.get("", response_model=PageResponse[OwnerResponse])
def get_owners(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список собственников с поиском, фильтрами и сортировкой"""
    return page_response(OwnerService(db).list(params))


@router.get("/filters")
def get_owner_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return OwnerService(db).filter_options()


@router.get("/{owner_id}", response_model=OwnerResponse)
def get_owner(owner_id: str, db: Session = Depends(get_db)):
    """Получить собственника по ID"""
    return OwnerService(db).get(owner_id)


@router.post("", response_model=OwnerResponse, status_code=201)
def create_owner(payload: OwnerCreate, db: Session = Depends(get_db)):
    """Создать собственника"""
    return OwnerService(db).create(payload)


@router.put("/{owner_id}", response_model=OwnerResponse)
def update_owner(owner_id: str, payload: OwnerUpdate, db: Session = Depends(get_db)):
    """Обновить собственника"""
    return OwnerService(db).update(owner_id, payload)


@router.delete("/{owner_id}")
def delete_owner(owner_id: str, db: Session = Depends(get_db)):
    """Удалить собственника"""
    OwnerService(db).delete(owner_id)
    return {"message": "Owner deleted", "id": owner_id}


@router.patch("/{owner_id}/restore", response_model=OwnerResponse)
def restore_owner(owner_id: str, db: Session = Depends(get_db)):
    """Восстановить удаленную запись"""
    return OwnerService(db).restore(owner_id)
