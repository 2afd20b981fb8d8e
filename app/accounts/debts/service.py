from sqlalchemy.orm import Session

from app.accounts import ledger
from app.exceptions import NotFound

from . import models, schemas


def _scoped(db: Session, user_id: int):
    return db.query(models.Debt).filter(models.Debt.user_id == user_id)


def _apply_delta(debt: models.Debt):
    debt.delta = float(ledger.compute_debt_delta(debt.amount, debt.kind))


def list_debts(db: Session, user_id: int):
    """Oldest first, the order a running balance is read in."""
    return (
        _scoped(db, user_id)
        .order_by(
            models.Debt.date.asc(),
            models.Debt.created_at.asc(),
            models.Debt.id.asc(),
        )
        .all()
    )


def get_debt(db: Session, debt_id: int, user_id: int):
    debt = _scoped(db, user_id).filter(models.Debt.id == debt_id).first()
    if not debt:
        raise NotFound()
    return debt


def list_balances(db: Session, user_id: int):
    balances = ledger.employee_balances(list_debts(db, user_id))
    return [
        {"employee": employee, "balance": float(balance)}
        for employee, balance in sorted(balances.items())
    ]


def list_running(db: Session, user_id: int, employee: str | None = None):
    """Chronological ledger with the balance after each entry, optionally for one employee."""
    debts = list_debts(db, user_id)
    if employee:
        debts = [d for d in debts if d.employee == employee.strip()]
    balances = ledger.running_balances(debts)
    return [
        {**schemas.DebtOut.model_validate(debt).model_dump(), "balance": float(balance)}
        for debt, balance in zip(debts, balances)
    ]


def create_debt(db: Session, data: schemas.DebtCreate, user_id: int):
    debt = models.Debt(
        user_id=user_id,
        date=data.date,
        employee=data.employee,
        kind=data.kind,
        amount=data.amount,
        notes=data.notes,
    )
    _apply_delta(debt)

    try:
        db.add(debt)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(debt)
    return debt


def update_debt(db: Session, debt_id: int, user_id: int, data: schemas.DebtUpdate):
    debt = get_debt(db, debt_id, user_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(debt, field, value)

    _apply_delta(debt)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(debt)
    return debt


def delete_debt(db: Session, debt_id: int, user_id: int):
    try:
        _scoped(db, user_id).filter(models.Debt.id == debt_id).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    return {"ok": True}
