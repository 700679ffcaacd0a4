from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.person import TenantCreate, TenantUpdate, TenantResponse
from nairim.services.tenant_service import TenantService
from nairim.services.query import ListParams

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


@router.get("", response_model=PageResponse[TenantResponse])
def get_tenants(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список арендаторов с поиском, фильтрами и сортировкой"""
    return page_response(TenantService(db).list(params))


@router.get("/filters")
def get_tenant_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return TenantService(db).filter_options()


@router.get("/{tenant_id}", response_model=TenantResponse)
def get_tenant(tenant_id: str, db: Session = Depends(get_db)):
    """Получить арендатора по ID"""
    return TenantService(db).get(tenant_id)


@router.post("", response_model=TenantResponse, status_code=201)
def create_tenant(payload: TenantCreate, db: Session = Depends(get_db)):
    """Создать арендатора"""
    return TenantService(db).create(payload)


@router.put("/{tenant_id}", response_model=TenantResponse)
def update_tenant(tenant_id: str, payload: TenantUpdate, db: Session = Depends(get_db)):
    """Обновить арендатора"""
    return TenantService(db).update(tenant_id, payload)


@router.delete("/{tenant_id}")
def delete_tenant(tenant_id: str, db: Session = Depends(get_db)):
    """Удалить арендатора"""
    TenantService(db).delete(tenant_id)
    return {"message": "Tenant deleted", "id": tenant_id}


@router.patch("/{tenant_id}/restore", response_model=TenantResponse)
def restore_tenant(tenant_id: str, db: Session = Depends(get_db)):
    """Восстановить удаленную запись"""
    return TenantService(db).restore(tenant_id)
