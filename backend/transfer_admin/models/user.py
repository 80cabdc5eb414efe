from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime

from transfer_admin.models.base import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    # Login identifier; seed accounts use plain names so this is not validated as an e-mail
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(32), default="ADMIN")  # ADMIN | ACCOUNTANT
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
