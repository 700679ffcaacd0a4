from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.lease import LeaseCreate, LeaseUpdate, LeaseResponse
from nairim.services.lease_service import LeaseService
from nairim.services.query import ListParams

router = APIRouter(prefix="/api/leases", tags=["leases"])


@router.get("", response_model=PageResponse[LeaseResponse])
def get_leases(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список договоров аренды с поиском, фильтрами и сортировкой"""
    return page_response(LeaseService(db).list(params))


@router.get("/filters")
def get_lease_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return LeaseService(db).filter_options()


@router.get("/{lease_id}", response_model=LeaseResponse)
def get_lease(lease_id: str, db: Session = Depends(get_db)):
    """Получить договор аренды по ID"""
    return LeaseService(db).get(lease_id)


@router.post("", response_model=LeaseResponse, status_code=201)
def create_lease(payload: LeaseCreate, db: Session = Depends(get_db)):
    """Создать договор аренды"""
    return LeaseService(db).create(payload)


@router.put("/{lease_id}", response_model=LeaseResponse)
def update_lease(lease_id: str, payload: LeaseUpdate, db: Session = Depends(get_db)):
    """Обновить договор аренды"""
    return LeaseService(db).update(lease_id, payload)


@router.delete("/{lease_id}")
def delete_lease(lease_id: str, db: Session = Depends(get_db)):
    """Удалить договор аренды"""
    LeaseService(db).delete(lease_id)
    return {"message": "Lease deleted", "id": lease_id}


@router.patch("/{lease_id}/restore", response_model=LeaseResponse)
def restore_lease(lease_id: str, db: Session = Depends(get_db)):
    """Восстановить удаленную запись"""
    return LeaseService(db).restore(lease_id)
