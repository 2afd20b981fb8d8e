import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

DebtKind = Literal["advance", "repay"]


class DebtCreate(BaseModel):
    date: dt.date
    employee: str = Field(..., min_length=1)
    kind: DebtKind
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    notes: Optional[str] = None

    @field_validator("employee")
    @classmethod
    def strip_employee(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("employee is required")
        return v

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class DebtUpdate(BaseModel):
    date: Optional[dt.date] = None
    employee: Optional[str] = Field(None, min_length=1)
    kind: Optional[DebtKind] = None
    amount: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    notes: Optional[str] = None

    @field_validator("employee")
    @classmethod
    def strip_employee(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("employee cannot be blank")
        return v

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def required_fields_not_null(self):
        for name in ("date", "employee", "kind", "amount"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class DebtOut(BaseModel):
    id: int
    user_id: int
    date: dt.date
    employee: str
    kind: DebtKind
    amount: float
    delta: float
    notes: Optional[str] = None
    created_at: dt.datetime

    class Config:
        from_attributes = True


class EmployeeBalance(BaseModel):
    employee: str
    balance: float


class DebtRunningOut(DebtOut):
    balance: float
