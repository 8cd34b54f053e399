# backend/tests/test_backup.py
import io
import sqlite3
import tarfile
from contextlib import closing

import pytest
from sqlalchemy import select

import utils.backup as backup
from config import settings
from database import Base, engine
from utils.backup import BackupError, DB_MEMBER, RESET_TABLES, import_archive


def _export(client) -> bytes:
    res = client.get("/api/backup/export")
    assert res.status_code == 200, res.text
    assert res.headers["content-type"] == "application/gzip"
    return res.content


def _import(client, content: bytes):
    return client.post("/api/backup/import", files={"file": ("backup.tar.gz", content, "application/gzip")})


def _tarball(entries) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for name, data in entries:
            info = tarfile.TarInfo(name)
            if data is None:
                info.type = tarfile.DIRTYPE
                tar.addfile(info)
                continue
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


def _dump_tables():
    with engine.connect() as conn:
        return {
            table.name: sorted((tuple(row) for row in conn.execute(select(table))), key=repr)
            for table in Base.metadata.sorted_tables
        }


def test_export_contains_database_and_assets(client):
    (settings.image_dir / "logo.png").write_bytes(b"logo")
    with tarfile.open(fileobj=io.BytesIO(_export(client)), mode="r:gz") as tar:
        names = tar.getnames()
    assert DB_MEMBER in names
    assert "img/logo.png" in names


def test_restore_round_trip(client, create_customer, create_order):
    kept = create_customer(companyName="Yedeklenen")
    order = create_order(customer=kept)
    (settings.image_dir / "logo.png").write_bytes(b"logo")
    client.post("/api/personnel", json={"firstName": "Ali", "lastName": "Veli", "role": "Operatör"})
    client.patch(f"/api/orders/{order['id']}", json={"status": "waiting_manager_approval"})
    before = _dump_tables()
    archive = _export(client)

    create_customer(companyName="Sonradan")
    client.patch(f"/api/orders/{order['id']}", json={"status": "offer_sent"})
    (settings.image_dir / "logo.png").unlink()
    (settings.document_dir / "extra.pdf").write_bytes(b"pdf")

    res = _import(client, archive)
    assert res.status_code == 200, res.text
    assert res.json() == {"success": True, "restarting": False}
    assert _dump_tables() == before

    names = [c["companyName"] for c in client.get("/api/customers").json()]
    assert names == ["Yedeklenen"]
    assert client.get(f"/api/orders/{order['id']}").json()["status"] == "waiting_manager_approval"
    assert (settings.image_dir / "logo.png").read_bytes() == b"logo"
    assert not (settings.document_dir / "extra.pdf").exists()

    # Login still works against the restored users table
    assert client.post("/api/auth/login", json={"username": "admin", "password": "admin"}).status_code == 200


def test_import_rejects_garbage(client):
    res = _import(client, b"definitely not a tarball")
    assert res.status_code == 400


@pytest.mark.parametrize("entries", [
    [(DB_MEMBER, b"x"), ("../escape.txt", b"x")],
    [(DB_MEMBER, b"x"), ("/etc/cron.d/job", b"x")],
    [(DB_MEMBER, b"x"), ("scripts/run.sh", b"x")],
    [("img/logo.png", b"x")],
])
def test_import_rejects_unsafe_archives(client, create_customer, entries):
    create_customer(companyName="Dokunulmaz")
    res = _import(client, _tarball(entries))
    assert res.status_code == 400
    assert [c["companyName"] for c in client.get("/api/customers").json()] == ["Dokunulmaz"]


def test_import_rejects_links(tmp_path):
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        db = tarfile.TarInfo(DB_MEMBER)
        db.size = 1
        tar.addfile(db, io.BytesIO(b"x"))
        link = tarfile.TarInfo("img/passwd")
        link.type = tarfile.SYMTYPE
        link.linkname = "/etc/passwd"
        tar.addfile(link)
    archive = tmp_path / "links.tar.gz"
    archive.write_bytes(buffer.getvalue())

    with pytest.raises(BackupError):
        import_archive(engine, archive, settings.storage_path)


def _sqlite_bytes(tmp_path, *statements) -> bytes:
    path = tmp_path / "foreign.db"
    with closing(sqlite3.connect(path)) as conn:
        for statement in statements:
            conn.execute(statement)
        conn.commit()
    return path.read_bytes()


def test_import_rejects_invalid_database(client, create_customer, tmp_path):
    create_customer(companyName="Dokunulmaz")
    (settings.image_dir / "logo.png").write_bytes(b"logo")
    candidates = [
        _tarball([(DB_MEMBER, b"not sqlite at all")]),
        _tarball([(DB_MEMBER, None)]),
        _tarball([(DB_MEMBER, _sqlite_bytes(tmp_path, "CREATE TABLE notes (id INTEGER)"))]),
    ]

    for content in candidates:
        res = _import(client, content)
        assert res.status_code == 400, res.text

    assert [c["companyName"] for c in client.get("/api/customers").json()] == ["Dokunulmaz"]
    assert (settings.image_dir / "logo.png").read_bytes() == b"logo"


def test_failed_restore_puts_previous_data_back(client, create_customer, tmp_path, monkeypatch):
    create_customer(companyName="Eski")
    archive = tmp_path / "backup.tar.gz"
    archive.write_bytes(_export(client))

    create_customer(companyName="Yeni")
    (settings.image_dir / "logo.png").write_bytes(b"logo")
    before = _dump_tables()

    def broken_upgrade():
        raise RuntimeError("migration failed")

    monkeypatch.setattr(backup, "init_db", broken_upgrade)
    with pytest.raises(RuntimeError):
        import_archive(engine, archive, settings.storage_path)

    assert _dump_tables() == before
    assert (settings.image_dir / "logo.png").read_bytes() == b"logo"
    assert len(client.get("/api/customers").json()) == 2


# =========================
# Reset / sample data
# =========================
def test_reset_requires_confirmation(client, create_order):
    create_order()
    res = client.post("/api/reset-data", json={"confirmation": "sifirla"})
    assert res.status_code == 400
    assert len(client.get("/api/orders").json()) == 1


def test_reset_keeps_master_data(client, create_order):
    order = create_order()
    client.post("/api/personnel", json={"firstName": "Ali", "lastName": "Veli", "role": "Operatör"})
    client.post("/api/stock-items", json={"stockNumber": "S1", "company": "A", "product": "B", "quantity": 5})
    client.patch(f"/api/orders/{order['id']}", json={"status": "waiting_manager_approval"})

    res = client.post("/api/reset-data", json={"confirmation": "SIFIRLA"})
    assert res.status_code == 200
    assert res.json() == {"success": True}

    assert client.get("/api/orders").json() == []
    assert client.get("/api/products").json() == []
    assert client.get("/api/stock-items").json() == []
    assert client.get("/api/notifications", params={"roleId": "2"}).json() == []

    assert len(client.get("/api/customers").json()) == 1
    assert len(client.get("/api/personnel").json()) == 1
    assert len(client.get("/api/roles").json()) == 8
    assert [u["username"] for u in client.get("/api/users").json()] == ["admin"]
    assert len(client.get("/api/molds").json()) > 0

    logs = client.get("/api/logs").json()
    assert [entry["action"] for entry in logs["items"]] == ["RESET_DATA"]


def test_reset_table_names_exist():
    from database import Base
    assert set(RESET_TABLES) <= set(Base.metadata.tables)


def test_seed_test_data(client, create_customer):
    create_customer(companyName="Gerçek Müşteri")
    res = client.post("/api/seed-test-data")
    assert res.status_code == 200, res.text
    counts = res.json()["counts"]
    assert counts == {"customers": 3, "products": 4, "orders": 7, "stock_items": 4}

    # Running it again replaces the demo rows instead of duplicating them
    client.post("/api/seed-test-data")
    orders = client.get("/api/orders").json()
    assert len(orders) == 7
    assert len(client.get("/api/customers").json()) == 4
    assert all(line["total"] is not None for o in orders for line in o["items"])
    assert len(client.get("/api/roles").json()) == 8
