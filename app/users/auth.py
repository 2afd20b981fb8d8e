from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger
from sqlalchemy.orm import Session

from app.config import Settings
from app.exceptions import Conflict, Unauthorized
from app.security.passwords import hash_password, verify_password
from app.security.tokens import create_access_token, decode_access_token
from app.users import crud as user_crud
from app.users import schemas
from app.users.models import User

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def issue_token(user: User, config: Settings) -> schemas.TokenResponse:
    token = create_access_token(user.id, user.email, config)
    return schemas.TokenResponse(
        token=token,
        user=schemas.UserDisplaySchema.model_validate(user),
    )


def register_user(db: Session, payload: schemas.RegisterSchema, config: Settings) -> schemas.TokenResponse:
    if user_crud.get_user_by_email(db, payload.email):
        raise Conflict("EMAIL_IN_USE")

    user = user_crud.create_user_with_settings(
        db,
        email=payload.email,
        password_hash=hash_password(payload.password),
        company_name=payload.company_name,
        config=config,
    )
    logger.info(f"User registered: {user.email} (id={user.id})")
    return issue_token(user, config)


def authenticate_user(db: Session, email: Optional[str], password: Optional[str]):
    email = (email or "").strip().lower()
    if not email:
        return None
    user = user_crud.get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password or "", user.password_hash):
        return None
    return user


def login_user(db: Session, payload: schemas.LoginSchema, config: Settings) -> schemas.TokenResponse:
    user = authenticate_user(db, payload.email, payload.password)
    if not user:
        # Same answer for unknown email and wrong password
        logger.warning(f"Authentication denied for email: {payload.email}")
        raise Unauthorized("INVALID_CREDENTIALS")

    logger.info(f"User authenticated: {user.email}")
    return issue_token(user, config)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    config: Settings = Depends(get_app_settings),
) -> schemas.CurrentUser:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise Unauthorized()

    claims = decode_access_token(credentials.credentials, config)
    if claims is None:
        logger.warning("Rejected bearer token")
        raise Unauthorized()

    return schemas.CurrentUser(id=claims["uid"], email=claims["email"])
