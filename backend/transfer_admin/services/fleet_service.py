from datetime import date
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from transfer_admin.core.exceptions import ConflictError, NotFoundError
from transfer_admin.models.driver import Driver
from transfer_admin.models.vehicle import Vehicle
from transfer_admin.schemas.fleet import DriverCreate, VehicleCreate
from transfer_admin.services import validation

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 4
DEFAULT_VEHICLE_TYPE = "STANDARD"


class FleetService:
    """Drivers and vehicles."""

    def __init__(self, db: Session):
        self.db = db

    def list_drivers(self) -> List[Driver]:
        return (
            self.db.query(Driver)
            .options(selectinload(Driver.vehicle), selectinload(Driver.reservations))
            .order_by(Driver.name.asc(), Driver.id.asc())
            .all()
        )

    def create_driver(self, payload: DriverCreate) -> Driver:
        validation.require_fields({"name": payload.name, "phone": payload.phone}, "Ad ve telefon zorunludur")
        vehicle_id = None if payload.is_external else payload.vehicle_id
        if vehicle_id is not None and not self.db.get(Vehicle, vehicle_id):
            raise NotFoundError("Araç bulunamadı", entity="Vehicle", id=vehicle_id)
        d = Driver(
            name=payload.name.strip(),
            phone=payload.phone.strip(),
            email=validation.clean_optional(payload.email),
            license_no=validation.clean_optional(payload.license_no),
            is_external=payload.is_external,
            vehicle_id=vehicle_id,
        )
        self.db.add(d)
        self.db.commit()
        self.db.refresh(d)
        logger.info("Driver %s created (%s, external=%s)", d.id, d.name, d.is_external)
        return d

    def list_vehicles(self) -> List[Vehicle]:
        return (
            self.db.query(Vehicle)
            .options(selectinload(Vehicle.drivers))
            .order_by(Vehicle.plate.asc())
            .all()
        )

    def create_vehicle(self, payload: VehicleCreate) -> Vehicle:
        validation.require_fields(
            {"plate": payload.plate, "brand": payload.brand, "model": payload.model},
            "Plaka, marka ve model zorunludur",
        )
        plate = payload.plate.strip().upper()
        if self.db.query(Vehicle).filter(Vehicle.plate == plate).first():
            raise ConflictError("Bu plaka zaten kayıtlı")
        v = Vehicle(
            plate=plate,
            brand=payload.brand.strip(),
            model=payload.model.strip(),
            year=payload.year or date.today().year,
            capacity=payload.capacity or DEFAULT_CAPACITY,
            type=validation.clean_optional(payload.type) or DEFAULT_VEHICLE_TYPE,
        )
        self.db.add(v)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent insert of the same plate
            self.db.rollback()
            raise ConflictError("Bu plaka zaten kayıtlı")
        self.db.refresh(v)
        logger.info("Vehicle %s created (%s %s %s)", v.id, v.plate, v.brand, v.model)
        return v
