from sqlalchemy import CheckConstraint, String, Integer, ForeignKey, DateTime, Date, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import date, datetime
from decimal import Decimal

from transfer_admin.models.base import Base

class AccountingRecord(Base):
    __tablename__ = "accounting_records"
    __table_args__ = (CheckConstraint("amount > 0", name="ck_accounting_records_amount_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    type: Mapped[str] = mapped_column(String(16), index=True)  # INCOME | EXPENSE
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(64), nullable=True)
    payment_date: Mapped[date] = mapped_column(Date, index=True)
    reservation_id: Mapped[int | None] = mapped_column(ForeignKey("reservations.id", ondelete="SET NULL"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    reservation = relationship("Reservation", back_populates="accounting_records")
