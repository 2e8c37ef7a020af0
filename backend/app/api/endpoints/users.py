from fastapi import APIRouter, Depends, status
from typing import List, Optional
from app.api.dependencies import get_user_service
from app.api.models import User
from app.services.user_service import UserService

router = APIRouter()

@router.post(
    "",
    response_model=User,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(user: User, service: UserService = Depends(get_user_service)):
    return service.create(user)

@router.get("", response_model=List[User], response_model_exclude_unset=True)
def get_users(service: UserService = Depends(get_user_service)):
    return service.find_all()

# A miss answers 200 with a null body, same as a hit
@router.get("/{user_id}", response_model=Optional[User], response_model_exclude_unset=True)
def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return service.find_one(user_id)
