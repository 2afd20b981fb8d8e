from sqlalchemy.orm import Session

from app.accounts import ledger
from app.company_settings import service as settings_service
from app.exceptions import NotFound

from . import models, schemas


def _scoped(db: Session, user_id: int):
    return db.query(models.Transaction).filter(models.Transaction.user_id == user_id)


def _apply_totals(db: Session, tx: models.Transaction, user_id: int):
    # Always against the owner's settings as they are now
    user_settings = settings_service.get_settings(db, user_id)
    tax, total = ledger.compute_transaction_totals(tx.base, tx.type, user_settings)
    tx.tax = float(tax)
    tx.total = float(total)


# =========================
# List Transactions
# =========================
def list_transactions(db: Session, user_id: int):
    return (
        _scoped(db, user_id)
        .order_by(
            models.Transaction.date.desc(),
            models.Transaction.created_at.desc(),
            models.Transaction.id.desc(),
        )
        .all()
    )


# =========================
# Get Transaction by ID
# =========================
def get_transaction(db: Session, transaction_id: int, user_id: int):
    tx = _scoped(db, user_id).filter(models.Transaction.id == transaction_id).first()
    if not tx:
        raise NotFound()
    return tx


# =========================
# Create Transaction
# =========================
def create_transaction(db: Session, data: schemas.TransactionCreate, user_id: int):
    tx = models.Transaction(
        user_id=user_id,
        date=data.date,
        type=data.type,
        category=data.category,
        base=data.base,
        employee=data.employee,
        notes=data.notes,
    )
    _apply_totals(db, tx, user_id)

    try:
        db.add(tx)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(tx)
    return tx


# =========================
# Update Transaction
# =========================
def update_transaction(db: Session, transaction_id: int, user_id: int,
                       data: schemas.TransactionUpdate):
    tx = get_transaction(db, transaction_id, user_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(tx, field, value)

    # Recomputed even when base and type are unchanged
    _apply_totals(db, tx, user_id)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(tx)
    return tx


# =========================
# Delete Transaction
# =========================
def delete_transaction(db: Session, transaction_id: int, user_id: int):
    try:
        (
            _scoped(db, user_id)
            .filter(models.Transaction.id == transaction_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    return {"ok": True}
