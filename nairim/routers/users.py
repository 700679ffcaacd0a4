from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nairim.database import get_db
from nairim.routers.params import list_params
from nairim.schemas.common import PageResponse, page_response
from nairim.schemas.user import UserResponse, UserUpdate
from nairim.services.query import ListParams
from nairim.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=PageResponse[UserResponse])
def get_users(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """Получить список пользователей"""
    return page_response(UserService(db).list(params))


@router.get("/filters")
def get_user_filters(db: Session = Depends(get_db)) -> Dict[str, Any]:
    return UserService(db).filter_options()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Session = Depends(get_db)):
    return UserService(db).get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: str, payload: UserUpdate, db: Session = Depends(get_db)):
    """Обновить профиль пользователя (создание идет через регистрацию)"""
    return UserService(db).update(user_id, payload)


@router.delete("/{user_id}")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    UserService(db).delete(user_id)
    return {"message": "User deleted", "id": user_id}


@router.patch("/{user_id}/restore", response_model=UserResponse)
def restore_user(user_id: str, db: Session = Depends(get_db)):
    return UserService(db).restore(user_id)
