from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from transfer_admin.api.deps import get_current_user, require_roles
from transfer_admin.api.serializers import reservation_out
from transfer_admin.db.session import get_db
from transfer_admin.models.enums import Role
from transfer_admin.schemas.reservation import ReservationCreate, ReservationUpdate
from transfer_admin.services.reservation_service import ReservationService

router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED)
def create_reservation(payload: ReservationCreate, db: Session = Depends(get_db)):
    """Public reservation form submission. No auth."""
    r = ReservationService(db).create(payload)
    return {"ok": True, "data": reservation_out(r)}

@router.get("", dependencies=[Depends(get_current_user)])
@router.get("/", dependencies=[Depends(get_current_user)])
def list_reservations(db: Session = Depends(get_db)):
    items = ReservationService(db).list()
    return {"ok": True, "data": [reservation_out(r) for r in items]}

@router.put("/{reservation_id}", dependencies=[Depends(require_roles(Role.admin.value))])
def update_reservation(reservation_id: str, payload: ReservationUpdate, db: Session = Depends(get_db)):
    """Change status, price, payment status and/or driver assignment.

    Only keys present in the body are applied. Sending ``driverId`` (or
    ``isExternal=true``) rewrites the whole assignment:
      - isExternal=true  -> company driver cleared, external name/phone stored
      - otherwise        -> external name/phone cleared, driverId stored (null unassigns)
    """
    r = ReservationService(db).update(reservation_id, payload)
    return {"ok": True, "data": reservation_out(r)}

@router.delete("/{reservation_id}", dependencies=[Depends(require_roles(Role.admin.value))])
def delete_reservation(reservation_id: str, db: Session = Depends(get_db)):
    rid = ReservationService(db).delete(reservation_id)
    return {"ok": True, "data": {"id": rid}, "message": "Rezervasyon silindi"}
