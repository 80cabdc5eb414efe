import logging
from typing import List

from sqlalchemy.orm import Session, selectinload

from transfer_admin.core.exceptions import NotFoundError, ValidationError
from transfer_admin.models.driver import Driver
from transfer_admin.models.enums import PaymentStatus, ReservationStatus, values
from transfer_admin.models.passenger import Passenger
from transfer_admin.models.reservation import Reservation
from transfer_admin.schemas.reservation import ReservationCreate, ReservationUpdate
from transfer_admin.services import validation

logger = logging.getLogger(__name__)

class ReservationService:
    """Reservation lifecycle: public submission, staff status/driver/payment changes, deletion."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Reservation).options(
            selectinload(Reservation.passengers),
            selectinload(Reservation.driver).selectinload(Driver.vehicle),
        )

    def get(self, reservation_id) -> Reservation:
        rid = validation.parse_id(reservation_id, "Geçersiz rezervasyon ID")
        r = self._query().filter(Reservation.id == rid).first()
        if not r:
            raise NotFoundError("Rezervasyon bulunamadı", entity="Reservation", id=rid)
        return r

    def create(self, payload: ReservationCreate) -> Reservation:
        validation.require_fields({
            "from": payload.from_,
            "to": payload.to,
            "date": payload.date,
            "time": payload.time,
            "phone": payload.phone,
        })
        names = validation.passenger_names(payload.passengers)
        r = Reservation(
            origin=payload.from_.strip(),
            destination=payload.to.strip(),
            date=payload.date.strip(),
            time=payload.time.strip(),
            phone=payload.phone.strip(),
            flight_code=validation.clean_optional(payload.flight_code),
            passenger_count=max(1, len(names)),
            luggage_count=validation.coerce_count(payload.luggage_count),
            status=ReservationStatus.pending.value,
            payment_status=PaymentStatus.unpaid.value,
            is_external=False,
        )
        r.passengers = [Passenger(name=n) for n in names]
        self.db.add(r)
        self.db.commit()
        logger.info("Reservation %s created (%s -> %s, %s %s, %d pax)", r.id, r.origin, r.destination, r.date, r.time, r.passenger_count)
        return self.get(r.id)

    def list(self) -> List[Reservation]:
        # Full scan, newest first; volume is a few thousand rows at most
        return self._query().order_by(Reservation.created_at.desc(), Reservation.id.desc()).all()

    def update(self, reservation_id, patch: ReservationUpdate) -> Reservation:
        r = self.get(reservation_id)
        present = patch.model_fields_set
        changes: dict = {}

        # Validate everything before touching the row
        if "status" in present and not validation.is_blank(patch.status):
            changes["status"] = validation.check_enum(
                patch.status, values(ReservationStatus), "Geçersiz durum", "status"
            )
        if "payment_status" in present and not validation.is_blank(patch.payment_status):
            changes["payment_status"] = validation.check_enum(
                patch.payment_status, values(PaymentStatus), "Geçersiz ödeme durumu", "paymentStatus"
            )
        if "price" in present:
            changes["price"] = None if validation.is_blank(patch.price) else validation.parse_decimal(
                patch.price, "Geçersiz fiyat", "price"
            )
        if "driver_id" in present or patch.is_external:
            changes.update(self._assignment(patch))

        for field, value in changes.items():
            setattr(r, field, value)
        self.db.commit()
        logger.info("Reservation %s updated: %s", r.id, ", ".join(sorted(changes)) or "no changes")
        return self.get(r.id)

    def _assignment(self, patch: ReservationUpdate) -> dict:
        """Driver fields for the new assignment; company and external drivers exclude each other."""
        if patch.is_external:
            return {
                "driver_id": None,
                "is_external": True,
                "external_driver_name": validation.clean_optional(patch.external_driver_name),
                "external_driver_phone": validation.clean_optional(patch.external_driver_phone),
            }
        if patch.driver_id is not None:
            driver = self.db.get(Driver, patch.driver_id)
            if not driver:
                raise NotFoundError("Şoför bulunamadı", entity="Driver", id=patch.driver_id)
            if driver.is_external:
                raise ValidationError("Dış şoför şirket şoförü olarak atanamaz", field="driverId")
        return {
            "driver_id": patch.driver_id,
            "is_external": False,
            "external_driver_name": None,
            "external_driver_phone": None,
        }

    def delete(self, reservation_id) -> int:
        r = self.get(reservation_id)
        rid = r.id
        # Passengers go with the reservation, ledger entries only lose their link
        self.db.delete(r)
        self.db.commit()
        logger.info("Reservation %s deleted", rid)
        return rid
