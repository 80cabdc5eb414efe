from sqlalchemy import String, Integer, ForeignKey, DateTime, Boolean, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime
from decimal import Decimal

from transfer_admin.models.base import Base

class Reservation(Base):
    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    # Route, exposed as "from"/"to" in the API
    origin: Mapped[str] = mapped_column(String(255))
    destination: Mapped[str] = mapped_column(String(255))
    # Local calendar values as entered by the customer, never combined into a timestamp
    date: Mapped[str] = mapped_column(String(32), index=True)
    time: Mapped[str] = mapped_column(String(16))
    phone: Mapped[str] = mapped_column(String(64))
    flight_code: Mapped[str | None] = mapped_column(String(32), nullable=True)
    passenger_count: Mapped[int] = mapped_column(Integer, default=1)
    luggage_count: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(String(32), default="PENDING", index=True)  # PENDING | CONFIRMED | CANCELLED | COMPLETED
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    payment_status: Mapped[str | None] = mapped_column(String(32), default="UNPAID", nullable=True)  # UNPAID | PAID | PARTIALLY_PAID | REFUNDED
    # Either a company driver or free-text external driver details, never both
    driver_id: Mapped[int | None] = mapped_column(ForeignKey("drivers.id", ondelete="SET NULL"), nullable=True)
    is_external: Mapped[bool] = mapped_column(Boolean, default=False)
    external_driver_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    external_driver_phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    passengers = relationship(
        "Passenger",
        back_populates="reservation",
        cascade="all, delete-orphan",
        order_by="Passenger.id",
    )
    driver = relationship("Driver", back_populates="reservations")
    # Ledger entries outlive the reservation; the ORM nulls their link on delete
    accounting_records = relationship("AccountingRecord", back_populates="reservation")
