from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.users import auth, schemas

router = APIRouter()


@router.post("/register", response_model=schemas.TokenResponse)
def sign_up(
    user: schemas.RegisterSchema,
    db: Session = Depends(get_db),
    config: Settings = Depends(auth.get_app_settings),
):
    return auth.register_user(db, user, config)


@router.post("/login", response_model=schemas.TokenResponse)
def login(
    credentials: schemas.LoginSchema,
    db: Session = Depends(get_db),
    config: Settings = Depends(auth.get_app_settings),
):
    return auth.login_user(db, credentials, config)
