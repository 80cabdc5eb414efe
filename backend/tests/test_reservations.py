from transfer_admin.models.accounting_record import AccountingRecord
from transfer_admin.models.passenger import Passenger

from conftest import login, reservation_body


def create_reservation(client, **overrides) -> dict:
    r = client.post("/reservations", json=reservation_body(**overrides))
    assert r.status_code == 201, r.text
    return r.json()["data"]


def create_driver(client, headers, **overrides) -> dict:
    body = {"name": "Ahmet Yılmaz", "phone": "05321234567"}
    body.update(overrides)
    r = client.post("/drivers", json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_with_named_passengers(client):
    data = create_reservation(client, passengers=["Ali", "Veli"], flightCode="TK2412")
    assert data["passengerCount"] == 2
    assert [p["name"] for p in data["passengers"]] == ["Ali", "Veli"]
    assert data["status"] == "PENDING"
    assert data["paymentStatus"] == "UNPAID"
    assert data["flightCode"] == "TK2412"
    assert data["from"] == "Antalya Havalimanı"
    assert data["to"] == "Kemer"
    assert data["driverId"] is None
    assert data["isExternal"] is False


def test_create_without_passengers_counts_one(client):
    data = create_reservation(client, passengers=[])
    assert data["passengerCount"] == 1
    assert data["passengers"] == []


def test_create_discards_blank_and_non_string_passengers(client):
    data = create_reservation(client, passengers=["", "   ", 5, None, " Ayşe "])
    assert data["passengerCount"] == 1
    assert [p["name"] for p in data["passengers"]] == ["Ayşe"]

    data = create_reservation(client, passengers=["", "  "])
    assert data["passengerCount"] == 1
    assert data["passengers"] == []


def test_create_coerces_luggage_count(client):
    assert create_reservation(client, luggageCount="3")["luggageCount"] == 3
    assert create_reservation(client, luggageCount=-2)["luggageCount"] == 0
    assert create_reservation(client, luggageCount="many")["luggageCount"] == 0
    assert create_reservation(client)["luggageCount"] == 0


def test_create_caps_huge_luggage_count(client):
    data = create_reservation(client, luggageCount=1e30)
    assert data["luggageCount"] == 2**31 - 1


def test_create_missing_phone_fails_without_write(client, admin_headers):
    body = reservation_body()
    del body["phone"]
    r = client.post("/reservations", json=body)
    assert r.status_code == 400
    assert r.json()["ok"] is False
    assert r.json()["code"] == "validation_error"

    r = client.post("/reservations", json=reservation_body(to="   "))
    assert r.status_code == 400

    listed = client.get("/reservations", headers=admin_headers).json()["data"]
    assert listed == []


def test_list_requires_auth(client):
    r = client.get("/reservations")
    assert r.status_code == 401
    assert r.json()["code"] == "unauthorized"

    r = client.get("/reservations", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_list_newest_first(client, admin_headers):
    first = create_reservation(client, passengers=["Ali"])
    second = create_reservation(client, to="Side")
    r = client.get("/reservations", headers=admin_headers)
    assert r.status_code == 200, r.text
    ids = [item["id"] for item in r.json()["data"]]
    assert ids == [second["id"], first["id"]]
    assert r.json()["data"][1]["passengers"][0]["name"] == "Ali"


def test_status_transitions_are_unrestricted(client, admin_headers):
    res = create_reservation(client)
    for status in ["COMPLETED", "PENDING", "CANCELLED", "CONFIRMED"]:
        r = client.put(f"/reservations/{res['id']}", json={"status": status}, headers=admin_headers)
        assert r.status_code == 200, r.text
        assert r.json()["data"]["status"] == status


def test_update_rejects_out_of_enum_values(client, admin_headers):
    res = create_reservation(client)
    r = client.put(f"/reservations/{res['id']}", json={"status": "DONE"}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["error"] == "Geçersiz durum"

    r = client.put(f"/reservations/{res['id']}", json={"paymentStatus": "FREE"}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["error"] == "Geçersiz ödeme durumu"

    r = client.put(f"/reservations/{res['id']}", json={"price": "cheap"}, headers=admin_headers)
    assert r.status_code == 400

    # Nothing was applied
    listed = client.get("/reservations", headers=admin_headers).json()["data"]
    assert listed[0]["status"] == "PENDING"
    assert listed[0]["paymentStatus"] == "UNPAID"


def test_update_invalid_or_missing_id(client, admin_headers):
    for bad in ["abc", "0", "-3"]:
        r = client.put(f"/reservations/{bad}", json={"status": "CONFIRMED"}, headers=admin_headers)
        assert r.status_code == 400, bad
        assert r.json()["error"] == "Geçersiz rezervasyon ID"

    r = client.put("/reservations/9999", json={"status": "CONFIRMED"}, headers=admin_headers)
    assert r.status_code == 404
    assert r.json()["code"] == "not_found"


def test_update_requires_admin(client, accountant_headers):
    res = create_reservation(client)
    r = client.put(f"/reservations/{res['id']}", json={"status": "CONFIRMED"})
    assert r.status_code == 401

    r = client.put(f"/reservations/{res['id']}", json={"status": "CONFIRMED"}, headers=accountant_headers)
    assert r.status_code == 403
    assert r.json()["code"] == "forbidden"


def test_price_and_payment_are_independent_of_status(client, admin_headers):
    res = create_reservation(client)
    r = client.put(
        f"/reservations/{res['id']}",
        json={"price": 150.5, "paymentStatus": "PAID"},
        headers=admin_headers,
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["price"] == 150.5
    assert data["paymentStatus"] == "PAID"
    assert data["status"] == "PENDING"

    r = client.put(f"/reservations/{res['id']}", json={"price": None}, headers=admin_headers)
    assert r.json()["data"]["price"] is None
    assert r.json()["data"]["paymentStatus"] == "PAID"


def test_price_rounding_and_range(client, admin_headers):
    res = create_reservation(client)
    for bad in [1e9, 100000000]:
        r = client.put(f"/reservations/{res['id']}", json={"price": bad}, headers=admin_headers)
        assert r.status_code == 400, bad

    r = client.put(f"/reservations/{res['id']}", json={"price": 99999999.99}, headers=admin_headers)
    assert r.status_code == 200, r.text
    r = client.put(f"/reservations/{res['id']}", json={"price": 0.004}, headers=admin_headers)
    assert r.json()["data"]["price"] == 0


def test_blank_status_values_are_ignored(client, admin_headers):
    res = create_reservation(client)
    client.put(f"/reservations/{res['id']}", json={"status": "CONFIRMED", "paymentStatus": "PAID"}, headers=admin_headers)
    r = client.put(
        f"/reservations/{res['id']}",
        json={"status": "", "paymentStatus": "", "price": 90},
        headers=admin_headers,
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["status"] == "CONFIRMED"
    assert data["paymentStatus"] == "PAID"
    assert data["price"] == 90


def test_external_then_company_assignment(client, admin_headers):
    vehicle = client.post(
        "/vehicles", json={"plate": "07ABC07", "brand": "Mercedes", "model": "Vito"}, headers=admin_headers
    ).json()["data"]
    driver = create_driver(client, admin_headers, vehicleId=vehicle["id"])
    res = create_reservation(client)

    r = client.put(
        f"/reservations/{res['id']}",
        json={"driverId": driver["id"]},
        headers=admin_headers,
    )
    assert r.json()["data"]["driverId"] == driver["id"]

    r = client.put(
        f"/reservations/{res['id']}",
        json={"driverId": None, "isExternal": True, "externalDriverName": "Ali Demir", "externalDriverPhone": "05349876543"},
        headers=admin_headers,
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["isExternal"] is True
    assert data["externalDriverName"] == "Ali Demir"
    assert data["externalDriverPhone"] == "05349876543"
    assert data["driverId"] is None
    assert data["driver"] is None

    r = client.put(
        f"/reservations/{res['id']}",
        json={"driverId": driver["id"], "isExternal": False},
        headers=admin_headers,
    )
    data = r.json()["data"]
    assert data["isExternal"] is False
    assert data["externalDriverName"] is None
    assert data["externalDriverPhone"] is None
    assert data["driverId"] == driver["id"]
    assert data["driver"]["name"] == "Ahmet Yılmaz"
    assert data["driver"]["vehicle"]["plate"] == "07ABC07"


def test_external_flag_wins_over_driver_id(client, admin_headers):
    driver = create_driver(client, admin_headers)
    res = create_reservation(client)
    r = client.put(
        f"/reservations/{res['id']}",
        json={"driverId": driver["id"], "isExternal": True, "externalDriverName": "Veli Şahin"},
        headers=admin_headers,
    )
    data = r.json()["data"]
    assert data["driverId"] is None
    assert data["isExternal"] is True
    assert data["externalDriverName"] == "Veli Şahin"


def test_status_patch_keeps_assignment(client, admin_headers):
    driver = create_driver(client, admin_headers)
    res = create_reservation(client)
    client.put(f"/reservations/{res['id']}", json={"driverId": driver["id"]}, headers=admin_headers)
    r = client.put(f"/reservations/{res['id']}", json={"status": "CONFIRMED"}, headers=admin_headers)
    data = r.json()["data"]
    assert data["status"] == "CONFIRMED"
    assert data["driverId"] == driver["id"]


def test_external_false_alone_keeps_company_driver(client, admin_headers):
    driver = create_driver(client, admin_headers)
    res = create_reservation(client)
    client.put(f"/reservations/{res['id']}", json={"driverId": driver["id"]}, headers=admin_headers)
    r = client.put(
        f"/reservations/{res['id']}",
        json={"status": "CONFIRMED", "isExternal": False},
        headers=admin_headers,
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["status"] == "CONFIRMED"
    assert data["driverId"] == driver["id"]
    assert data["isExternal"] is False


def test_external_true_alone_assigns_external_driver(client, admin_headers):
    driver = create_driver(client, admin_headers)
    res = create_reservation(client)
    client.put(f"/reservations/{res['id']}", json={"driverId": driver["id"]}, headers=admin_headers)
    r = client.put(
        f"/reservations/{res['id']}",
        json={"isExternal": True, "externalDriverName": "Ali Demir"},
        headers=admin_headers,
    )
    data = r.json()["data"]
    assert data["isExternal"] is True
    assert data["driverId"] is None
    assert data["externalDriverName"] == "Ali Demir"


def test_assign_unknown_or_external_driver_record(client, admin_headers):
    res = create_reservation(client)
    r = client.put(f"/reservations/{res['id']}", json={"driverId": 4242}, headers=admin_headers)
    assert r.status_code == 404

    external = create_driver(client, admin_headers, name="Dış Şoför", isExternal=True)
    r = client.put(f"/reservations/{res['id']}", json={"driverId": external["id"]}, headers=admin_headers)
    assert r.status_code == 400


def test_delete_removes_passengers(client, admin_headers, db):
    res = create_reservation(client, passengers=["Ali", "Veli"])
    assert db.query(Passenger).filter(Passenger.reservation_id == res["id"]).count() == 2

    r = client.delete(f"/reservations/{res['id']}", headers=admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["ok"] is True

    assert db.query(Passenger).filter(Passenger.reservation_id == res["id"]).count() == 0
    assert client.get("/reservations", headers=admin_headers).json()["data"] == []


def test_delete_keeps_ledger_entries(client, admin_headers, db):
    res = create_reservation(client)
    r = client.post(
        "/accounting", json={"amount": 500, "type": "INCOME", "reservationId": res["id"]}, headers=admin_headers
    )
    record_id = r.json()["data"]["id"]

    client.delete(f"/reservations/{res['id']}", headers=admin_headers)

    record = db.get(AccountingRecord, record_id)
    assert record is not None
    assert record.reservation_id is None


def test_delete_errors(client, admin_headers, accountant_headers):
    assert client.delete("/reservations/abc", headers=admin_headers).status_code == 400
    assert client.delete("/reservations/9999", headers=admin_headers).status_code == 404
    res = create_reservation(client)
    assert client.delete(f"/reservations/{res['id']}").status_code == 401
    assert client.delete(f"/reservations/{res['id']}", headers=accountant_headers).status_code == 403


def test_accountant_can_list_reservations(client):
    create_reservation(client)
    headers = login(client, "muhasebe2@example.com", role="ACCOUNTANT")
    r = client.get("/reservations", headers=headers)
    assert r.status_code == 200
    assert len(r.json()["data"]) == 1
