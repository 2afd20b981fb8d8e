from sqlalchemy.orm import Session

from app.exceptions import NotFound
from app.users.models import UserSettings

from . import schemas


def get_settings(db: Session, user_id: int) -> UserSettings:
    user_settings = db.query(UserSettings).filter(UserSettings.user_id == user_id).first()
    if not user_settings:
        # Token outlived its user
        raise NotFound()
    return user_settings


def update_settings(db: Session, user_id: int, data: schemas.SettingsUpdate) -> UserSettings:
    user_settings = get_settings(db, user_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(user_settings, field, value)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(user_settings)
    return user_settings
