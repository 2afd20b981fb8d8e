from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.users import schemas as user_schemas
from app.users.auth import get_current_user

from . import schemas, service

router = APIRouter()


@router.get("", response_model=schemas.SettingsOut)
def read_settings(
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.get_settings(db, current_user.id)


@router.put("", response_model=schemas.SettingsOut)
def update_settings(
    data: schemas.SettingsUpdate,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.update_settings(db, current_user.id, data)
