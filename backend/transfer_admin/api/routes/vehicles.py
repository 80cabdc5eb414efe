from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from transfer_admin.api.deps import get_current_user, require_roles
from transfer_admin.api.serializers import vehicle_out
from transfer_admin.db.session import get_db
from transfer_admin.models.enums import Role
from transfer_admin.schemas.fleet import VehicleCreate
from transfer_admin.services.fleet_service import FleetService

router = APIRouter()

@router.get("", dependencies=[Depends(get_current_user)])
@router.get("/", dependencies=[Depends(get_current_user)])
def list_vehicles(db: Session = Depends(get_db)):
    return {"ok": True, "data": [vehicle_out(v) for v in FleetService(db).list_vehicles()]}

@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_roles(Role.admin.value))])
@router.post("/", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_roles(Role.admin.value))])
def create_vehicle(payload: VehicleCreate, db: Session = Depends(get_db)):
    v = FleetService(db).create_vehicle(payload)
    return {"ok": True, "data": vehicle_out(v)}
