from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class AccountingRecordCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: Any = None
    type: Optional[str] = None
    description: Optional[str] = None
    payment_method: Optional[str] = Field(default=None, alias="paymentMethod")
    reservation_id: Optional[int] = Field(default=None, alias="reservationId")
    payment_date: Optional[str] = Field(default=None, alias="paymentDate")
