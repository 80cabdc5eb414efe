from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from transfer_admin.api.deps import get_current_user, require_roles
from transfer_admin.api.serializers import driver_out
from transfer_admin.db.session import get_db
from transfer_admin.models.enums import Role
from transfer_admin.schemas.fleet import DriverCreate
from transfer_admin.services.fleet_service import FleetService

router = APIRouter()

@router.get("", dependencies=[Depends(get_current_user)])
@router.get("/", dependencies=[Depends(get_current_user)])
def list_drivers(db: Session = Depends(get_db)):
    return {"ok": True, "data": [driver_out(d) for d in FleetService(db).list_drivers()]}

@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_roles(Role.admin.value))])
@router.post("/", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_roles(Role.admin.value))])
def create_driver(payload: DriverCreate, db: Session = Depends(get_db)):
    d = FleetService(db).create_driver(payload)
    return {"ok": True, "data": driver_out(d)}
