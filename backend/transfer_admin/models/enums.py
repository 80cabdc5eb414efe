from enum import Enum


class Role(str, Enum):
    """Staff roles embedded in bearer tokens."""

    admin = "ADMIN"
    accountant = "ACCOUNTANT"


class ReservationStatus(str, Enum):
    """Reservation lifecycle states.

    Transitions are unrestricted: staff may move a reservation from any
    state to any other (e.g. COMPLETED back to PENDING to correct a
    mistake). Only membership in this set is validated.
    """

    pending = "PENDING"
    confirmed = "CONFIRMED"
    cancelled = "CANCELLED"
    completed = "COMPLETED"


class PaymentStatus(str, Enum):
    unpaid = "UNPAID"
    paid = "PAID"
    partially_paid = "PARTIALLY_PAID"
    refunded = "REFUNDED"


class RecordType(str, Enum):
    income = "INCOME"
    expense = "EXPENSE"


def values(enum_cls) -> list[str]:
    return [m.value for m in enum_cls]
