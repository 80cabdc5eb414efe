from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from transfer_admin.api.deps import require_roles
from transfer_admin.api.serializers import accounting_record_out
from transfer_admin.db.session import get_db
from transfer_admin.models.enums import Role
from transfer_admin.schemas.accounting import AccountingRecordCreate
from transfer_admin.services.accounting_service import AccountingService

router = APIRouter(dependencies=[Depends(require_roles(Role.admin.value, Role.accountant.value))])

@router.get("")
@router.get("/")
def list_records(
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD, inclusive"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD, inclusive"),
    type: Optional[str] = Query(None, description="INCOME or EXPENSE"),
    db: Session = Depends(get_db),
):
    """Ledger entries, newest payment first, with totals over the filtered set."""
    page = AccountingService(db).list(start_date=start_date, end_date=end_date, type=type)
    return {
        "ok": True,
        "data": {
            "records": [accounting_record_out(rec) for rec in page.records],
            "totals": page.totals.as_dict(),
        },
    }

@router.post("", status_code=status.HTTP_201_CREATED)
@router.post("/", status_code=status.HTTP_201_CREATED)
def create_record(payload: AccountingRecordCreate, db: Session = Depends(get_db)):
    rec = AccountingService(db).create(payload)
    return {"ok": True, "data": accounting_record_out(rec)}
