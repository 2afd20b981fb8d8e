from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.users import schemas as user_schemas
from app.users.auth import get_current_user

from . import schemas, service

router = APIRouter()


@router.get("", response_model=List[schemas.DebtOut])
def list_debts(
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.list_debts(db, current_user.id)


# ----------------------------------------
# BALANCE PER EMPLOYEE
# ----------------------------------------
@router.get("/balances", response_model=List[schemas.EmployeeBalance])
def list_balances(
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.list_balances(db, current_user.id)


# ----------------------------------------
# RUNNING BALANCE (oldest first)
# ----------------------------------------
@router.get("/running", response_model=List[schemas.DebtRunningOut])
def list_running(
    employee: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.list_running(db, current_user.id, employee)


@router.post("", response_model=schemas.DebtOut)
def create_debt(
    debt: schemas.DebtCreate,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.create_debt(db, debt, user_id=current_user.id)


@router.get("/{debt_id}", response_model=schemas.DebtOut)
def get_debt(
    debt_id: int,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.get_debt(db, debt_id, current_user.id)


@router.put("/{debt_id}", response_model=schemas.DebtOut)
def update_debt(
    debt_id: int,
    debt: schemas.DebtUpdate,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.update_debt(db, debt_id, current_user.id, debt)


@router.delete("/{debt_id}")
def delete_debt(
    debt_id: int,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.delete_debt(db, debt_id, current_user.id)
