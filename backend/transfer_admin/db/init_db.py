import logging

from transfer_admin.core.config import settings
from transfer_admin.core.security import get_password_hash
from transfer_admin.db.base import Base
from transfer_admin.db.session import engine, SessionLocal
from transfer_admin.models.driver import Driver
from transfer_admin.models.enums import Role
from transfer_admin.models.user import User
from transfer_admin.models.vehicle import Vehicle

logger = logging.getLogger(__name__)

DEMO_VEHICLES = [
    {"plate": "34ABC123", "brand": "Mercedes", "model": "Vito", "year": 2022, "capacity": 7, "type": "VIP"},
    {"plate": "34XYZ789", "brand": "Mercedes", "model": "Sprinter", "year": 2021, "capacity": 12, "type": "MINIBUS"},
]

# (driver fields, plate of the vehicle it drives or None)
DEMO_DRIVERS = [
    ({"name": "Ahmet Yılmaz", "phone": "05321234567", "email": "ahmet@example.com", "license_no": "A123456"}, "34ABC123"),
    ({"name": "Mehmet Kaya", "phone": "05337654321", "email": "mehmet@example.com", "license_no": "B654321"}, "34XYZ789"),
    ({"name": "Ali Demir", "phone": "05349876543", "is_external": True}, None),
]

def create_tables():
    Base.metadata.create_all(bind=engine)

def _ensure_user(db, email: str, password: str, role: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        user = User(email=email, hashed_password=get_password_hash(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Seeded %s user %s", role, email)
    return user

def seed_demo_data():
    db = SessionLocal()
    try:
        # Seed default admin and accountant (idempotent)
        admin_email = (settings.seed_admin_email or "admin@example.com").strip().lower()
        admin_pwd = settings.seed_admin_password or "Admin1234!"
        accountant_email = (settings.seed_accountant_email or "accountant@example.com").strip().lower()
        accountant_pwd = settings.seed_accountant_password or "Accountant1234!"
        _ensure_user(db, admin_email, admin_pwd, Role.admin.value)
        _ensure_user(db, accountant_email, accountant_pwd, Role.accountant.value)

        # Demo fleet only into an empty table
        if db.query(Vehicle).count() == 0:
            vehicles = {v["plate"]: Vehicle(**v) for v in DEMO_VEHICLES}
            db.add_all(vehicles.values())
            for fields, plate in DEMO_DRIVERS:
                db.add(Driver(vehicle=vehicles.get(plate) if plate else None, **fields))
            db.commit()
            logger.info("Seeded %d vehicles and %d drivers", len(DEMO_VEHICLES), len(DEMO_DRIVERS))
    finally:
        db.close()
