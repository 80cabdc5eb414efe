def test_public_form_page(client):
    r = client.get("/reserve")
    assert r.status_code == 200
    assert "Transfer Rezervasyonu" in r.text


def test_admin_pages_render(client):
    for path, marker in [("/login", "Giriş"), ("/admin", "Rezervasyonlar"), ("/admin/accounting", "Muhasebe"), ("/admin/fleet", "Araçlar")]:
        r = client.get(path)
        assert r.status_code == 200, path
        assert marker in r.text


def test_health(client):
    r = client.get("/health/")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "data": {"db": "ok"}}


def test_unknown_route_uses_envelope(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.json()["ok"] is False
