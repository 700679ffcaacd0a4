from typing import Any, Dict

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.favorite import FavoriteCheck, FavoriteCreate, FavoriteResponse
from nairim.services.favorite_service import FavoriteService
from nairim.services.query import ListParams

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.get("", response_model=PageResponse[FavoriteResponse])
def get_favorites(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список избранного (фильтры user_id, property_id)"""
    return page_response(FavoriteService(db).list(params))


@router.get("/filters")
def get_favorite_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return FavoriteService(db).filter_options()


@router.get("/check", response_model=FavoriteCheck)
def check_favorite(
    user_id: str = Query(...),
    property_id: str = Query(...),
    db: Session = Depends(get_db),
):
    """Проверить, есть ли объект в избранном пользователя"""
    favorite = FavoriteService(db).find(user_id, property_id)
    return FavoriteCheck(is_favorite=favorite is not None, favorite_id=favorite.id if favorite else None)


@router.get("/{favorite_id}", response_model=FavoriteResponse)
def get_favorite(favorite_id: str, db: Session = Depends(get_db)):
    return FavoriteService(db).get(favorite_id)


@router.post("", response_model=FavoriteResponse, status_code=201)
def create_favorite(payload: FavoriteCreate, db: Session = Depends(get_db)):
    """Добавить объект в избранное"""
    return FavoriteService(db).create(payload)


@router.delete("/user/{user_id}/property/{property_id}")
def remove_favorite(user_id: str, property_id: str, db: Session = Depends(get_db)):
    """Убрать объект из избранного пользователя"""
    FavoriteService(db).remove(user_id, property_id)
    return {"message": "Favorite removed", "user_id": user_id, "property_id": property_id}


@router.delete("/{favorite_id}")
def delete_favorite(favorite_id: str, db: Session = Depends(get_db)):
    FavoriteService(db).delete(favorite_id)
    return {"message": "Favorite deleted", "id": favorite_id}


@router.patch("/{favorite_id}/restore", response_model=FavoriteResponse)
def restore_favorite(favorite_id: str, db: Session = Depends(get_db)):
    return FavoriteService(db).restore(favorite_id)
