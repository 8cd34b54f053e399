# backend/tests/test_molds.py
from utils.seed import DEFAULT_MOLDS


def test_catalog_seeded_on_startup(client):
    molds = client.get("/api/molds").json()
    assert len(molds) == len(DEFAULT_MOLDS)

    round_molds = client.get("/api/molds", params={"productType": "percinli", "boxShape": "Yuvarlak"}).json()
    labels = {m["dimensions"]: m["label"] for m in round_molds}
    assert labels["120"] == "Ø120"

    tray = client.get("/api/molds", params={"boxShape": "Tepsi"}).json()
    assert {m["label"] for m in tray} >= {"362x245 (Dalgalı)", "Ø400"}


def test_seed_defaults_is_idempotent(client):
    res = client.post("/api/molds/seed-defaults")
    assert res.status_code == 200
    assert res.json() == {"inserted": 0, "skipped": len(DEFAULT_MOLDS)}


def test_seed_restores_deleted_molds(client):
    kare = client.get("/api/molds", params={"boxShape": "Kare"}).json()[0]
    assert client.delete(f"/api/molds/{kare['id']}").json() == {"success": True}

    res = client.post("/api/molds/seed-defaults").json()
    assert res == {"inserted": 1, "skipped": len(DEFAULT_MOLDS) - 1}


def test_custom_mold_and_duplicates(client):
    body = {"productType": "sivama", "boxShape": "Standart", "dimensions": "120x80x20"}
    created = client.post("/api/molds", json=body)
    assert created.status_code == 201
    assert created.json()["label"] is None

    assert client.post("/api/molds", json=body).status_code == 409
    dup_default = {"productType": "percinli", "boxShape": "Kare", "dimensions": "55x55"}
    assert client.post("/api/molds", json=dup_default).status_code == 409


def test_catalog_has_no_duplicate_keys():
    keys = [(m["product_type"], m["box_shape"], m["dimensions"]) for m in DEFAULT_MOLDS]
    assert len(keys) == len(set(keys))
