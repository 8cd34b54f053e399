# backend/tests/conftest.py
import os
import shutil
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway database and storage folder before it is imported
_TMP_DIR = Path(tempfile.mkdtemp(prefix="symi-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"
os.environ["STORAGE_DIR"] = str(_TMP_DIR / "storage")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENFORCE_WORKFLOW_ORDER"] = "false"
os.environ["RESTART_AFTER_RESTORE"] = "false"

from fastapi.testclient import TestClient  # noqa: E402

from config import settings  # noqa: E402
from database import Base, SessionLocal, engine  # noqa: E402
from main import app  # noqa: E402
from utils.seed import seed_defaults  # noqa: E402


def _wipe_tables():
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


def _wipe_storage():
    for folder in (settings.image_dir, settings.document_dir):
        if folder.exists():
            shutil.rmtree(folder)
        folder.mkdir(parents=True, exist_ok=True)


@pytest.fixture(autouse=True)
def clean_state():
    """Every test starts from empty tables plus the startup seed."""
    _wipe_tables()
    _wipe_storage()
    db = SessionLocal()
    try:
        seed_defaults(db)
    finally:
        db.close()
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def create_customer(client):
    def _create(**overrides):
        body = {"companyName": "Anadolu Lokum", "contactName": "Ayşe Demir"}
        body.update(overrides)
        res = client.post("/api/customers", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_product(client):
    def _create(code="P1", **overrides):
        body = {"code": code, "name": f"Kutu {code}", "productType": "percinli", "boxShape": "Kare"}
        body.update(overrides)
        res = client.post("/api/products", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _create


def order_line(product, quantity=100, unit_price=10.0, vat_rate=20):
    return {
        "productId": product["id"],
        "productName": product["name"],
        "quantity": quantity,
        "unitPrice": unit_price,
        "vatRate": vat_rate,
    }


@pytest.fixture
def create_order(client, create_customer, create_product):
    def _create(items=None, **overrides):
        customer = overrides.pop("customer", None) or create_customer()
        if items is None:
            items = [order_line(create_product("P1"), quantity=250)]
        body = {
            "customerId": customer["id"],
            "customerName": customer["companyName"],
            "items": items,
            "currency": "TRY",
            "subtotal": 1000,
            "vatTotal": 200,
            "grandTotal": 1200,
        }
        body.update(overrides)
        res = client.post("/api/orders", json=body)
        assert res.status_code == 201, res.text
        return res.json()
    return _create
