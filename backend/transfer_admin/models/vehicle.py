from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime

from transfer_admin.models.base import Base

class Vehicle(Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    plate: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    brand: Mapped[str] = mapped_column(String(120))
    model: Mapped[str] = mapped_column(String(120))
    year: Mapped[int] = mapped_column(Integer)
    capacity: Mapped[int] = mapped_column(Integer, default=4)
    type: Mapped[str] = mapped_column(String(32), default="STANDARD")  # STANDARD | VIP | MINIBUS ...
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    drivers = relationship("Driver", back_populates="vehicle", order_by="Driver.name")
