from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.users import schemas as user_schemas
from app.users.auth import get_current_user

from . import schemas, service

router = APIRouter()


@router.get("", response_model=List[schemas.TransactionOut])
def list_transactions(
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.list_transactions(db, current_user.id)


@router.post("", response_model=schemas.TransactionOut)
def create_transaction(
    transaction: schemas.TransactionCreate,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.create_transaction(db, transaction, user_id=current_user.id)


@router.get("/{transaction_id}", response_model=schemas.TransactionOut)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.get_transaction(db, transaction_id, current_user.id)


@router.put("/{transaction_id}", response_model=schemas.TransactionOut)
def update_transaction(
    transaction_id: int,
    transaction: schemas.TransactionUpdate,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.update_transaction(db, transaction_id, current_user.id, transaction)


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: user_schemas.CurrentUser = Depends(get_current_user),
):
    return service.delete_transaction(db, transaction_id, current_user.id)
