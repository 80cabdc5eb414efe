import os
import tempfile
from pathlib import Path

# Must run before transfer_admin is imported: settings and engine read the env at import time
_db_file = Path(tempfile.mkdtemp(prefix="transfer_admin_")) / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{_db_file}"
os.environ["ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from transfer_admin.core.security import get_password_hash
from transfer_admin.db.base import Base
from transfer_admin.db.session import SessionLocal, engine
from transfer_admin.main import app
from transfer_admin.models.user import User

Base.metadata.create_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def ensure_user(email: str, password: str = "testpass", role: str = "ADMIN"):
    db = SessionLocal()
    u = db.query(User).filter(User.email == email).first()
    if not u:
        u = User(email=email, hashed_password=get_password_hash(password), role=role)
        db.add(u)
        db.commit()
    db.close()


def login(client: TestClient, email: str, role: str = "ADMIN") -> dict:
    ensure_user(email, role=role)
    r = client.post("/auth/login", json={"email": email, "password": "testpass"})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['data']['token']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, "admin@example.com")


@pytest.fixture
def accountant_headers(client):
    return login(client, "muhasebe@example.com", role="ACCOUNTANT")


def reservation_body(**overrides) -> dict:
    body = {
        "from": "Antalya Havalimanı",
        "to": "Kemer",
        "date": "2025-07-01",
        "time": "14:30",
        "phone": "05321112233",
    }
    body.update(overrides)
    return body
