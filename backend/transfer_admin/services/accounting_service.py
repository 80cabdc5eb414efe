import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from transfer_admin.core.exceptions import NotFoundError, ValidationError
from transfer_admin.models.accounting_record import AccountingRecord
from transfer_admin.models.enums import RecordType, values
from transfer_admin.models.reservation import Reservation
from transfer_admin.schemas.accounting import AccountingRecordCreate
from transfer_admin.services import validation

logger = logging.getLogger(__name__)


@dataclass
class LedgerTotals:
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.expense

    def as_dict(self) -> dict:
        return {"income": float(self.income), "expense": float(self.expense), "net": float(self.net)}


@dataclass
class LedgerPage:
    records: List[AccountingRecord] = field(default_factory=list)
    totals: LedgerTotals = field(default_factory=LedgerTotals)


def compute_totals(records: List[AccountingRecord]) -> LedgerTotals:
    totals = LedgerTotals()
    for rec in records:
        if rec.type == RecordType.income.value:
            totals.income += rec.amount
        elif rec.type == RecordType.expense.value:
            totals.expense += rec.amount
    return totals


class AccountingService:
    """Income/expense ledger. Entries are append-only."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(AccountingRecord).options(
            selectinload(AccountingRecord.reservation).selectinload(Reservation.driver)
        )

    def list(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        type: Optional[str] = None,
    ) -> LedgerPage:
        q = self._query()
        if not validation.is_blank(start_date):
            q = q.filter(AccountingRecord.payment_date >= validation.parse_date(start_date, "startDate"))
        if not validation.is_blank(end_date):
            q = q.filter(AccountingRecord.payment_date <= validation.parse_date(end_date, "endDate"))
        if not validation.is_blank(type):
            q = q.filter(AccountingRecord.type == validation.check_enum(
                type.strip(), values(RecordType), "Geçersiz kayıt türü", "type"
            ))
        records = q.order_by(AccountingRecord.payment_date.desc(), AccountingRecord.id.desc()).all()
        # Totals always describe exactly the filtered rows
        return LedgerPage(records=records, totals=compute_totals(records))

    def create(self, payload: AccountingRecordCreate) -> AccountingRecord:
        if validation.is_blank(payload.amount) or validation.is_blank(payload.type):
            raise ValidationError("Tutar ve tür zorunludur", field="amount" if validation.is_blank(payload.amount) else "type")
        amount = validation.parse_decimal(payload.amount, "Geçersiz tutar", "amount", positive=True)
        record_type = validation.check_enum(payload.type.strip(), values(RecordType), "Geçersiz kayıt türü", "type")
        payment_date = date.today()
        if not validation.is_blank(payload.payment_date):
            payment_date = validation.parse_date(payload.payment_date, "paymentDate")
        if payload.reservation_id is not None and not self.db.get(Reservation, payload.reservation_id):
            raise NotFoundError("Rezervasyon bulunamadı", entity="Reservation", id=payload.reservation_id)

        rec = AccountingRecord(
            amount=amount,
            type=record_type,
            description=validation.clean_optional(payload.description),
            payment_method=validation.clean_optional(payload.payment_method),
            payment_date=payment_date,
            reservation_id=payload.reservation_id,
        )
        self.db.add(rec)
        self.db.commit()
        logger.info("Ledger %s entry %s created: %s on %s", record_type, rec.id, amount, payment_date)
        return self._query().filter(AccountingRecord.id == rec.id).one()
