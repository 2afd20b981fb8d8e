from typing import Any, Optional

from pydantic import BaseModel, field_validator


# -------- USERS --------
class RegisterSchema(BaseModel):
    email: str
    password: str
    company_name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("email is required")
        return v

    @field_validator("password")
    @classmethod
    def require_password(cls, v: str) -> str:
        if not v:
            raise ValueError("password is required")
        return v

    @field_validator("company_name")
    @classmethod
    def blank_company_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class LoginSchema(BaseModel):
    # Left unvalidated so every bad login gets the same 401
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v)


class UserDisplaySchema(BaseModel):
    id: int
    email: str
    company_name: Optional[str] = None

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    token: str
    user: UserDisplaySchema


class CurrentUser(BaseModel):
    """Identity extracted from a verified bearer token."""
    id: int
    email: str
