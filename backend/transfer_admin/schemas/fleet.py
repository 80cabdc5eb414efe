from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class DriverCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    license_no: Optional[str] = Field(default=None, alias="licenseNo")
    is_external: bool = Field(default=False, alias="isExternal")
    vehicle_id: Optional[int] = Field(default=None, alias="vehicleId")

class VehicleCreate(BaseModel):
    plate: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    capacity: Optional[int] = None
    type: Optional[str] = None
