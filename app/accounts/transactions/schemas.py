import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

TransactionType = Literal["income", "expense"]


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


# =========================
# Create
# =========================
class TransactionCreate(BaseModel):
    date: dt.date
    type: TransactionType
    category: str = Field(..., min_length=1)
    base: float = Field(..., ge=0, allow_inf_nan=False)
    employee: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("employee", "notes")
    @classmethod
    def clean_optional(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


# =========================
# Update
# =========================
class TransactionUpdate(BaseModel):
    """Partial update; tax and total are not accepted and always recomputed."""
    date: Optional[dt.date] = None
    type: Optional[TransactionType] = None
    category: Optional[str] = Field(None, min_length=1)
    base: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    employee: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("employee", "notes")
    @classmethod
    def clean_optional(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    @model_validator(mode="after")
    def required_fields_not_null(self):
        for name in ("date", "type", "category", "base"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


# =========================
# Output
# =========================
class TransactionOut(BaseModel):
    id: int
    user_id: int
    date: dt.date
    type: TransactionType
    category: str
    base: float
    tax: float
    total: float
    employee: Optional[str] = None
    notes: Optional[str] = None
    created_at: dt.datetime

    class Config:
        from_attributes = True
