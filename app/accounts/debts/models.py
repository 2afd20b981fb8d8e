from datetime import datetime

from sqlalchemy import CheckConstraint, Column, Date, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class Debt(Base):
    __tablename__ = "debts"
    __table_args__ = (
        CheckConstraint("kind IN ('advance','repay')", name="ck_debts_kind"),
        Index("idx_debt_user_date", "user_id", "date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    date = Column(Date, nullable=False)
    employee = Column(String, nullable=False)
    kind = Column(String(10), nullable=False)

    amount = Column(Float, nullable=False)
    delta = Column(Float, nullable=False)  # +amount for advance, -amount for repay

    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    owner = relationship("User", back_populates="debts")
