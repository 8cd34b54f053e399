# backend/tests/test_crud.py
from conftest import order_line


# =========================
# Customers
# =========================
def test_customer_lifecycle(client, create_customer):
    customer = create_customer(email="info@lokum.com.tr")
    assert customer["id"]
    assert customer["createdAt"]

    res = client.patch(f"/api/customers/{customer['id']}", json={"phone": "0342 000 00 00"})
    assert res.status_code == 200
    assert res.json()["phone"] == "0342 000 00 00"
    assert res.json()["email"] == "info@lokum.com.tr"

    assert client.delete(f"/api/customers/{customer['id']}").json() == {"success": True}
    assert client.get(f"/api/customers/{customer['id']}").status_code == 404


def test_customer_search(client, create_customer):
    create_customer(companyName="Ege Çay")
    create_customer(companyName="Boğaziçi Kuruyemiş", contactName="Zeynep")

    assert [c["companyName"] for c in client.get("/api/customers", params={"q": "Ege"}).json()] == ["Ege Çay"]
    assert len(client.get("/api/customers", params={"q": "Zeynep"}).json()) == 1


def test_customer_requires_company_name(client):
    assert client.post("/api/customers", json={"contactName": "x"}).status_code == 422


def test_deleting_referenced_customer_conflicts(client, create_order):
    order = create_order()
    res = client.delete(f"/api/customers/{order['customerId']}")
    assert res.status_code == 409
    assert "referenced" in res.json()["detail"]
    assert client.get(f"/api/customers/{order['customerId']}").status_code == 200


def test_update_missing_customer_is_404(client):
    assert client.patch("/api/customers/missing", json={"phone": "1"}).status_code == 404


# =========================
# Products
# =========================
def test_product_nested_fields(client, create_product):
    product = create_product(
        "PRC-1",
        dimensions={"length": 100, "width": 100, "depth": 40},
        inks={"cmyk": True, "pantones": ["186 C"], "goldLak": {"has": True, "code": "G1"}},
        features={"hasLid": True, "gofre": True, "gofreDetails": {"count": 2, "notes": "logo"}},
        images={"customer": ["http://x/img/p.png"]},
    )
    fetched = client.get(f"/api/products/{product['id']}").json()
    assert fetched["dimensions"] == {"length": 100, "width": 100, "depth": 40}
    assert fetched["inks"]["goldLak"] == {"has": True, "code": "G1"}
    assert fetched["inks"]["silverLak"] == {"has": False, "code": None}
    assert fetched["features"]["gofreDetails"] == {"count": 2, "notes": "logo"}
    assert fetched["images"]["customer"] == ["http://x/img/p.png"]


def test_product_accepts_feature_list(client, create_product):
    product = create_product("P1", features=["Varak", "Lak"])
    assert product["features"]["extras"] == "Varak, Lak"
    assert product["features"]["hasLid"] is False


def test_product_patch_and_filters(client, create_product):
    kare = create_product("K-1")
    create_product("S-1", productType="sivama", boxShape="Standart")

    res = client.patch(f"/api/products/{kare['id']}", json={"features": {"hasWindow": True},
                                                           "windowDetails": {"width": 20, "height": 30, "count": 1}})
    assert res.status_code == 200
    assert res.json()["features"]["hasWindow"] is True
    assert res.json()["windowDetails"]["count"] == 1

    sivama = client.get("/api/products", params={"productType": "sivama"}).json()
    assert [p["code"] for p in sivama] == ["S-1"]
    assert [p["code"] for p in client.get("/api/products", params={"q": "K-"}).json()] == ["K-1"]


# =========================
# Stock
# =========================
def _stock(client, **overrides):
    body = {"stockNumber": "STK-1", "company": "Kağıt A.Ş.", "product": "Teneke levha",
            "quantity": 500, "unit": "adet", "category": "procurement"}
    body.update(overrides)
    res = client.post("/api/stock-items", json=body)
    assert res.status_code == 201, res.text
    return res.json()


def test_stock_deduct_and_set(client):
    item = _stock(client)

    res = client.patch(f"/api/stock-items/{item['id']}", json={"deduct": 120})
    assert res.json()["quantity"] == 380

    res = client.patch(f"/api/stock-items/{item['id']}", json={"quantity": 1000, "notes": "sayım"})
    assert res.json()["quantity"] == 1000
    assert res.json()["notes"] == "sayım"


def test_stock_patch_rejects_both_and_non_positive(client):
    item = _stock(client)
    assert client.patch(f"/api/stock-items/{item['id']}", json={"deduct": 1, "quantity": 2}).status_code == 422
    assert client.patch(f"/api/stock-items/{item['id']}", json={"deduct": 0}).status_code == 422


def test_stock_filters_and_delete(client):
    _stock(client)
    finished = _stock(client, stockNumber="STK-2", category="finished", productId="p-1")

    assert [s["id"] for s in client.get("/api/stock-items", params={"category": "finished"}).json()] == [finished["id"]]
    assert [s["id"] for s in client.get("/api/stock-items", params={"productId": "p-1"}).json()] == [finished["id"]]

    assert client.delete(f"/api/stock-items/{finished['id']}").json() == {"success": True}
    assert len(client.get("/api/stock-items").json()) == 1


# =========================
# Personnel / machines / shifts
# =========================
def test_personnel_with_nested_fields(client):
    res = client.post("/api/personnel", json={
        "firstName": "Ali", "lastName": "Yılmaz", "role": "Operatör", "department": "Üretim",
        "childrenCount": 2, "childrenAges": [4, 9], "documents": {"contract": "http://x/doc/c.pdf"},
    })
    assert res.status_code == 201, res.text
    person = res.json()
    assert person["childrenAges"] == [4, 9]

    res = client.patch(f"/api/personnel/{person['id']}", json={"endDate": "2025-01-31", "exitReason": "İstifa"})
    assert res.json()["endDate"] == "2025-01-31"
    assert res.json()["firstName"] == "Ali"

    assert len(client.get("/api/personnel", params={"department": "Üretim"}).json()) == 1
    assert client.delete(f"/api/personnel/{person['id']}").status_code == 200


def test_machine_and_shift(client, create_order):
    machine = client.post("/api/machines", json={"machineNumber": "M-01", "features": "Pres 80 ton"}).json()
    order = create_order()

    res = client.post("/api/shifts", json={
        "orderId": order["id"], "machineId": machine["id"], "personnelIds": ["p1", "p2"],
        "startTime": "2025-02-03T08:00", "plannedQuantity": 5000,
    })
    assert res.status_code == 201, res.text
    shift = res.json()
    assert shift["status"] == "planned"
    assert shift["personnelIds"] == ["p1", "p2"]

    res = client.patch(f"/api/shifts/{shift['id']}", json={"status": "completed", "producedQuantity": 4800,
                                                           "scrapQuantity": 200})
    assert res.json()["status"] == "completed"
    assert res.json()["producedQuantity"] == 4800

    assert len(client.get("/api/shifts", params={"machineId": machine["id"]}).json()) == 1
    assert client.get("/api/shifts", params={"status": "planned"}).json() == []

    assert client.patch(f"/api/machines/{machine['id']}", json={"lastMaintenance": "2025-01-10"}).status_code == 200
    assert client.delete(f"/api/shifts/{shift['id']}").status_code == 200
    assert client.delete(f"/api/machines/{machine['id']}").status_code == 200


# =========================
# Roles / users
# =========================
def test_seeded_roles(client):
    names = {r["name"] for r in client.get("/api/roles").json()}
    assert names == {"Admin", "Genel Müdür", "Satış", "Tasarımcı", "Matbaa", "Fabrika Müdürü", "Muhasebe", "Sevkiyat"}


def test_role_permissions_round_trip(client):
    role = client.post("/api/roles", json={"name": "Kalite", "permissions": ["production"]}).json()
    res = client.patch(f"/api/roles/{role['id']}", json={"permissions": ["production", "reports"]})
    assert res.json()["permissions"] == ["production", "reports"]


def test_user_lifecycle(client):
    res = client.post("/api/users", json={"username": "ayse", "password": "gizli", "roleId": "3",
                                          "fullName": "Ayşe Satış"})
    assert res.status_code == 201, res.text
    user = res.json()
    assert user["roleName"] == "Satış"
    assert "password" not in user and "passwordHash" not in user

    listed = client.get("/api/users").json()
    assert all("passwordHash" not in u for u in listed)

    res = client.patch(f"/api/users/{user['id']}", json={"isActive": False, "roleId": "4"})
    assert res.json()["isActive"] is False
    assert res.json()["roleName"] == "Tasarımcı"

    assert client.delete(f"/api/users/{user['id']}").json() == {"success": True}


def test_duplicate_username_conflicts(client):
    body = {"username": "mehmet", "password": "x", "roleId": "3", "fullName": "Mehmet"}
    assert client.post("/api/users", json=body).status_code == 201
    assert client.post("/api/users", json=body).status_code == 409


def test_user_with_unknown_role_is_404(client):
    body = {"username": "zeynep", "password": "x", "roleId": "missing", "fullName": "Zeynep"}
    assert client.post("/api/users", json=body).status_code == 404


def test_role_in_use_cannot_be_deleted(client):
    assert client.delete("/api/roles/1").status_code == 409


# =========================
# Company settings / planning
# =========================
def test_company_settings(client):
    assert client.get("/api/company-settings").json()["companyName"] is None

    res = client.put("/api/company-settings", json={"companyName": "Symi Ambalaj", "phone": "0212"})
    assert res.status_code == 200
    client.put("/api/company-settings", json={"mobile": "0532"})

    current = client.get("/api/company-settings").json()
    assert current["companyName"] == "Symi Ambalaj"
    assert current["mobile"] == "0532"


def test_monthly_plan_upsert(client):
    grid = {"2025-03-03": {"M-01": ["order-1"]}}
    first = client.put("/api/planning/monthly/2025/3", json={"planData": grid}).json()
    second = client.put("/api/planning/monthly/2025/3", json={"planData": {"note": "revize"}}).json()
    assert first["id"] == second["id"]

    plans = client.get("/api/planning/monthly", params={"year": 2025, "month": 3}).json()
    assert len(plans) == 1
    assert plans[0]["planData"] == {"note": "revize"}
    assert client.put("/api/planning/monthly/2025/13", json={"planData": {}}).status_code == 422


def test_weekly_plan_archive(client):
    res = client.post("/api/planning/weekly", json={"weekStartDate": "2025-03-03", "weekEndDate": "2025-03-09",
                                                    "planData": {"rows": []}})
    assert res.status_code == 201
    assert client.get("/api/planning/weekly").json()[0]["weekStartDate"] == "2025-03-03"


def test_sample_order_line_helper_matches_schema(create_order, create_product):
    order = create_order(items=[order_line(create_product("P9"), quantity=3)])
    assert order["items"][0]["quantity"] == 3
