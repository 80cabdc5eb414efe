from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class ReservationCreate(BaseModel):
    """Public reservation form body.

    ``passengers`` and ``luggageCount`` stay loosely typed: junk entries are
    discarded and counts coerced instead of rejecting the whole submission.
    """
    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    phone: Optional[str] = None
    flight_code: Optional[str] = Field(default=None, alias="flightCode")
    passengers: Any = None
    luggage_count: Any = Field(default=None, alias="luggageCount")

class ReservationUpdate(BaseModel):
    """Staff patch. Only keys present in the body are applied (see ``model_fields_set``)."""
    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = None
    payment_status: Optional[str] = Field(default=None, alias="paymentStatus")
    price: Any = None
    driver_id: Optional[int] = Field(default=None, alias="driverId")
    is_external: Optional[bool] = Field(default=None, alias="isExternal")
    external_driver_name: Optional[str] = Field(default=None, alias="externalDriverName")
    external_driver_phone: Optional[str] = Field(default=None, alias="externalDriverPhone")
