from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import Settings
from app.exceptions import Conflict
from app.users.models import User, UserSettings


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


def create_user_with_settings(db: Session, email: str, password_hash: str,
                              company_name: str | None, config: Settings) -> User:
    """
    Insert a user and its default settings in one commit.

    Either both rows exist afterwards or neither does.
    """
    new_user = User(
        email=email,
        password_hash=password_hash,
        company_name=company_name,
    )
    try:
        db.add(new_user)
        db.flush()  # ✅ get user id without committing
    except IntegrityError:
        # Only the users insert can hit the email unique index
        db.rollback()
        raise Conflict("EMAIL_IN_USE")

    try:
        db.add(UserSettings(
            user_id=new_user.id,
            currency=config.DEFAULT_CURRENCY,
            tax_income=config.DEFAULT_TAX_INCOME,
            tax_expense=config.DEFAULT_TAX_EXPENSE,
            monthly_expense_cap=config.DEFAULT_MONTHLY_EXPENSE_CAP,
        ))
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(new_user)
    return new_user
