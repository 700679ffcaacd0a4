from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.agency import AgencyCreate, AgencyUpdate, AgencyResponse
from nairim.services.agency_service import AgencyService
from nairim.services.query import ListParams

router = APIRouter(prefix="/api/agencies", tags=["agencies"])


@router.get("", response_model=PageResponse[AgencyResponse])
def get_agencies(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список агентств с поиском, фильтрами и сортировкой"""
    return page_response(AgencyService(db).list(params))


@router.get("/filters")
def get_agency_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return AgencyService(db).filter_options()


@router.get("/{agency_id}", response_model=AgencyResponse)
def get_agency(agency_id: str, db: Session = Depends(get_db)):
    """Получить агентство по ID"""
    return AgencyService(db).get(agency_id)


@router.post("", response_model=AgencyResponse, status_code=201)
def create_agency(payload: AgencyCreate, db: Session = Depends(get_db)):
    """Создать агентство"""
    return AgencyService(db).create(payload)


@router.put("/{agency_id}", response_model=AgencyResponse)
def update_agency(agency_id: str, payload: AgencyUpdate, db: Session = Depends(get_db)):
    """Обновить агентство"""
    return AgencyService(db).update(agency_id, payload)


@router.delete("/{agency_id}")
def delete_agency(agency_id: str, db: Session = Depends(get_db)):
    """Удалить агентство"""
    AgencyService(db).delete(agency_id)
    return {"message": "Agency deleted", "id": agency_id}


@router.patch("/{agency_id}/restore", response_model=AgencyResponse)
def restore_agency(agency_id: str, db: Session = Depends(get_db)):
    """Восстановить удаленную запись"""
    return AgencyService(db).restore(agency_id)
