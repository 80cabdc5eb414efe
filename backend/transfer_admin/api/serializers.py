"""JSON views of ORM rows, camelCase to match the admin panel scripts."""
from datetime import date, datetime
from decimal import Decimal

from transfer_admin.models.accounting_record import AccountingRecord
from transfer_admin.models.driver import Driver
from transfer_admin.models.reservation import Reservation
from transfer_admin.models.user import User
from transfer_admin.models.vehicle import Vehicle


def _iso(v: date | datetime | None) -> str | None:
    return v.isoformat() if v is not None else None


def _money(v: Decimal | None) -> float | None:
    return float(v) if v is not None else None


def user_out(u: User) -> dict:
    return {"id": u.id, "email": u.email, "role": u.role, "createdAt": _iso(u.created_at)}


def vehicle_brief(v: Vehicle | None) -> dict | None:
    if v is None:
        return None
    return {"id": v.id, "plate": v.plate, "brand": v.brand, "model": v.model}


def driver_brief(d: Driver | None) -> dict | None:
    if d is None:
        return None
    return {"id": d.id, "name": d.name, "phone": d.phone, "isExternal": d.is_external}


def reservation_out(r: Reservation) -> dict:
    driver = driver_brief(r.driver)
    if driver is not None:
        driver["vehicle"] = vehicle_brief(r.driver.vehicle)
    return {
        "id": r.id,
        "from": r.origin,
        "to": r.destination,
        "date": r.date,
        "time": r.time,
        "phone": r.phone,
        "flightCode": r.flight_code,
        "passengerCount": r.passenger_count,
        "luggageCount": r.luggage_count,
        "status": r.status,
        "price": _money(r.price),
        "paymentStatus": r.payment_status,
        "driverId": r.driver_id,
        "isExternal": r.is_external,
        "externalDriverName": r.external_driver_name,
        "externalDriverPhone": r.external_driver_phone,
        "driver": driver,
        "passengers": [{"id": p.id, "name": p.name, "reservationId": p.reservation_id} for p in r.passengers],
        "createdAt": _iso(r.created_at),
        "updatedAt": _iso(r.updated_at),
    }


def reservation_brief(r: Reservation | None) -> dict | None:
    """Reduced view attached to ledger entries."""
    if r is None:
        return None
    return {
        "id": r.id,
        "from": r.origin,
        "to": r.destination,
        "date": r.date,
        "time": r.time,
        "phone": r.phone,
        "status": r.status,
        "driver": driver_brief(r.driver),
    }


def accounting_record_out(rec: AccountingRecord) -> dict:
    return {
        "id": rec.id,
        "amount": _money(rec.amount),
        "type": rec.type,
        "description": rec.description,
        "paymentMethod": rec.payment_method,
        "paymentDate": _iso(rec.payment_date),
        "reservationId": rec.reservation_id,
        "reservation": reservation_brief(rec.reservation),
        "createdAt": _iso(rec.created_at),
    }


def driver_out(d: Driver, with_reservations: bool = True) -> dict:
    data = {
        "id": d.id,
        "name": d.name,
        "phone": d.phone,
        "email": d.email,
        "licenseNo": d.license_no,
        "isExternal": d.is_external,
        "vehicleId": d.vehicle_id,
        "vehicle": vehicle_out(d.vehicle, with_drivers=False) if d.vehicle else None,
        "createdAt": _iso(d.created_at),
    }
    if with_reservations:
        data["reservations"] = [
            {"id": r.id, "date": r.date, "time": r.time, "from": r.origin, "to": r.destination, "status": r.status}
            for r in d.reservations
        ]
    return data


def vehicle_out(v: Vehicle, with_drivers: bool = True) -> dict:
    data = {
        "id": v.id,
        "plate": v.plate,
        "brand": v.brand,
        "model": v.model,
        "year": v.year,
        "capacity": v.capacity,
        "type": v.type,
        "createdAt": _iso(v.created_at),
    }
    if with_drivers:
        data["drivers"] = [driver_brief(d) for d in v.drivers]
        data["driverCount"] = len(v.drivers)
    return data
