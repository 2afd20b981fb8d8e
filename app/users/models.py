from datetime import datetime

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    company_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    settings = relationship(
        "UserSettings",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    transactions = relationship(
        "Transaction",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    debts = relationship(
        "Debt",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserSettings(Base):
    __tablename__ = "settings"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    currency = Column(String, nullable=False)
    tax_income = Column(Float, nullable=False, default=15.0)
    tax_expense = Column(Float, nullable=False, default=15.0)
    monthly_expense_cap = Column(Float, nullable=False, default=50000.0)

    user = relationship("User", back_populates="settings")
