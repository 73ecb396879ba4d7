from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_admin
from backend.database import get_db
from backend.schemas.auth import UserResponse
from backend.services import user_service

router = APIRouter(tags=['users'])


@router.get('', response_model=list[UserResponse], dependencies=[Depends(require_admin)])
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)
