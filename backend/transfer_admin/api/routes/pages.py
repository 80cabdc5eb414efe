from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from transfer_admin.core.config import settings
from transfer_admin.models.enums import PaymentStatus, RecordType, ReservationStatus

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

router = APIRouter()

# Labels shown in the panel (staff and customers are Turkish speaking)
STATUS_LABELS = {
    ReservationStatus.pending.value: "Beklemede",
    ReservationStatus.confirmed.value: "Onaylandı",
    ReservationStatus.cancelled.value: "İptal Edildi",
    ReservationStatus.completed.value: "Tamamlandı",
}
PAYMENT_LABELS = {
    PaymentStatus.unpaid.value: "Ödenmedi",
    PaymentStatus.paid.value: "Ödendi",
    PaymentStatus.partially_paid.value: "Kısmi Ödeme",
    PaymentStatus.refunded.value: "İade Edildi",
}
RECORD_TYPE_LABELS = {
    RecordType.income.value: "Gelir",
    RecordType.expense.value: "Gider",
}


def _render(request: Request, name: str, **context):
    context.update({
        "app_name": settings.app_name,
        "status_labels": STATUS_LABELS,
        "payment_labels": PAYMENT_LABELS,
        "record_type_labels": RECORD_TYPE_LABELS,
    })
    return templates.TemplateResponse(request, name, context)


@router.get("/reserve", response_class=HTMLResponse)
def reserve_page(request: Request):
    """Public transfer request form."""
    return _render(request, "reserve.html")


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request):
    return _render(request, "login.html")


# Admin pages are plain shells: their scripts authenticate every API call with the stored token.
@router.get("/admin", response_class=HTMLResponse)
def admin_reservations_page(request: Request):
    return _render(request, "admin/reservations.html", active="reservations")


@router.get("/admin/accounting", response_class=HTMLResponse)
def admin_accounting_page(request: Request):
    return _render(request, "admin/accounting.html", active="accounting")


@router.get("/admin/fleet", response_class=HTMLResponse)
def admin_fleet_page(request: Request):
    return _render(request, "admin/fleet.html", active="fleet")
