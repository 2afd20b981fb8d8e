from typing import Optional

from pydantic import BaseModel, Field


class SettingsOut(BaseModel):
    currency: str
    tax_income: float
    tax_expense: float
    monthly_expense_cap: float

    class Config:
        from_attributes = True


class SettingsUpdate(BaseModel):
    """Every field optional; absent or null fields keep their stored value."""
    currency: Optional[str] = Field(None, min_length=1)
    tax_income: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    tax_expense: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    monthly_expense_cap: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
