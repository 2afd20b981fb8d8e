import hmac
import os
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Header
from fastapi.encoders import jsonable_encoder
from fastapi.responses import FileResponse, JSONResponse
from loguru import logger
from sqlalchemy.orm import Session

from app.accounts.debts.models import Debt
from app.accounts.transactions.models import Transaction
from app.config import Settings
from app.database import Database, get_database, get_db
from app.exceptions import Internal, Unauthorized
from app.users.auth import get_app_settings
from app.users.models import User, UserSettings

router = APIRouter()


def require_admin_token(
    x_admin_token: Optional[str] = Header(None),
    config: Settings = Depends(get_app_settings),
):
    """Shared-secret gate for the export endpoints, separate from user tokens."""
    expected = config.ADMIN_TOKEN
    if not expected or x_admin_token is None:
        logger.warning("Backup export refused: missing admin token")
        raise Unauthorized()

    if not hmac.compare_digest(x_admin_token.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Backup export refused: admin token mismatch")
        raise Unauthorized()


def _rows(db: Session, model, columns=None):
    columns = columns or [c.name for c in model.__table__.columns]
    return [
        {name: getattr(row, name) for name in columns}
        for row in db.query(model).order_by(*model.__table__.primary_key.columns).all()
    ]


@router.get("/backup/json", dependencies=[Depends(require_admin_token)])
def backup_json(db: Session = Depends(get_db)):
    """
    Dump every table across all users.

    Password hashes are left out of the users table.
    """
    payload = {
        "users": _rows(db, User, ["id", "email", "company_name", "created_at"]),
        "settings": _rows(db, UserSettings),
        "transactions": _rows(db, Transaction),
        "debts": _rows(db, Debt),
        "exported_at": datetime.now(timezone.utc).isoformat(),
    }
    logger.info(
        f"JSON backup exported: {len(payload['users'])} users, "
        f"{len(payload['transactions'])} transactions, {len(payload['debts'])} debts"
    )
    return JSONResponse(
        content=jsonable_encoder(payload),
        headers={"Content-Disposition": 'attachment; filename="backup.json"'},
    )


@router.get("/backup/sqlite", dependencies=[Depends(require_admin_token)])
def backup_sqlite(database: Database = Depends(get_database)):
    """Return the raw SQLite file."""
    db_path = database.file_path
    if not db_path or not os.path.isfile(db_path):
        raise Internal(details="store is not file-backed")

    logger.info(f"SQLite backup exported: {db_path}")
    return FileResponse(
        path=os.path.abspath(db_path),
        filename="data.db",
        media_type="application/octet-stream",
    )
