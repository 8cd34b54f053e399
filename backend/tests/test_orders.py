# backend/tests/test_orders.py
from conftest import order_line


def test_order_keeps_both_line_items(client, create_customer, create_product):
    customer = create_customer()
    p1 = create_product("P1", features=[])
    p2 = create_product("P2", features=[])

    res = client.post("/api/orders", json={
        "customerId": customer["id"],
        "customerName": customer["companyName"],
        "items": [order_line(p1, quantity=100), order_line(p2, quantity=50)],
        "currency": "TRY",
        "subtotal": 1500,
        "vatTotal": 300,
        "grandTotal": 1800,
        "status": "created",
    })
    assert res.status_code == 201, res.text
    order_id = res.json()["id"]

    fetched = client.get(f"/api/orders/{order_id}").json()
    assert [line["productId"] for line in fetched["items"]] == [p1["id"], p2["id"]]

    # PATCH replaces the list, it does not merge
    res = client.patch(f"/api/orders/{order_id}", json={"items": [order_line(p2, quantity=75)]})
    assert res.status_code == 200, res.text

    fetched = client.get(f"/api/orders/{order_id}").json()
    assert len(fetched["items"]) == 1
    assert fetched["items"][0]["productId"] == p2["id"]
    assert fetched["items"][0]["quantity"] == 75


def test_line_total_is_computed(create_order, create_product):
    product = create_product("P7")
    order = create_order(items=[order_line(product, quantity=10, unit_price=2.5, vat_rate=20)])
    assert order["items"][0]["total"] == 30.0


def test_duplicate_product_lines_are_rejected(client, create_customer, create_product):
    customer = create_customer()
    product = create_product("P1")
    res = client.post("/api/orders", json={
        "customerId": customer["id"],
        "customerName": customer["companyName"],
        "items": [order_line(product), order_line(product, quantity=5)],
    })
    assert res.status_code == 422


def test_duplicate_lines_rejected_on_patch(client, create_order, create_product):
    order = create_order()
    product = create_product("P2")
    res = client.patch(f"/api/orders/{order['id']}", json={"items": [order_line(product), order_line(product)]})
    assert res.status_code == 422


def test_order_defaults(create_order):
    order = create_order()
    assert order["status"] == "created"
    assert order["designImages"] == []
    assert order["assignedUserId"] is None


def test_client_supplied_id_is_kept(create_order):
    order = create_order(id="ORD-2024-001")
    assert order["id"] == "ORD-2024-001"


def test_unknown_status_is_rejected(client, create_order):
    order = create_order()
    res = client.patch(f"/api/orders/{order['id']}", json={"status": "teleported"})
    assert res.status_code == 422


def test_patch_missing_order_is_404(client):
    res = client.patch("/api/orders/nope", json={"status": "offer_sent"})
    assert res.status_code == 404


def test_get_and_delete_missing_order_is_404(client):
    assert client.get("/api/orders/nope").status_code == 404
    assert client.delete("/api/orders/nope").status_code == 404


def test_order_for_unknown_customer_conflicts(client, create_product):
    product = create_product()
    res = client.post("/api/orders", json={
        "customerId": "missing",
        "customerName": "Ghost Ltd.",
        "items": [order_line(product)],
    })
    assert res.status_code == 409
    assert "detail" in res.json()


def test_list_filters(client, create_customer, create_order):
    first = create_customer(companyName="First")
    second = create_customer(companyName="Second")
    a = create_order(customer=first)
    create_order(customer=second, status="offer_sent")
    client.patch(f"/api/orders/{a['id']}", json={"assignedRoleName": "Matbaa"})

    by_customer = client.get("/api/orders", params={"customerId": first["id"]}).json()
    assert [o["id"] for o in by_customer] == [a["id"]]

    by_status = client.get("/api/orders", params={"status": "offer_sent"}).json()
    assert len(by_status) == 1 and by_status[0]["customerName"] == "Second"

    by_role = client.get("/api/orders", params={"assignedRoleName": "Matbaa"}).json()
    assert [o["id"] for o in by_role] == [a["id"]]


def test_department_fields_round_trip(client, create_order, create_product):
    order = create_order()
    product_id = order["items"][0]["productId"]
    patch = {
        "jobSize": "70x100",
        "designImages": ["http://x/img/a.png", {"url": "http://x/img/b.png", "productId": product_id}],
        "procurementDetails": {product_id: {"plate": 10, "body": 5}},
        "stockUsage": {"stk-1": 12.5},
        "paymentMethod": "cek",
        "maturityDays": 60,
    }
    res = client.patch(f"/api/orders/{order['id']}", json=patch)
    assert res.status_code == 200, res.text

    fetched = client.get(f"/api/orders/{order['id']}").json()
    assert fetched["jobSize"] == "70x100"
    assert fetched["designImages"][0] == "http://x/img/a.png"
    assert fetched["designImages"][1] == {"url": "http://x/img/b.png", "productId": product_id}
    assert fetched["procurementDetails"][product_id] == {"plate": 10, "body": 5, "lid": 0, "bottom": 0}
    assert fetched["stockUsage"] == {"stk-1": 12.5}
    assert fetched["paymentMethod"] == "cek"


def test_null_for_required_field_is_ignored(client, create_order):
    order = create_order()
    res = client.patch(f"/api/orders/{order['id']}", json={"status": None, "deadline": "2025-03-01"})
    assert res.status_code == 200
    assert res.json()["status"] == "created"
    assert res.json()["deadline"] == "2025-03-01"


def test_delete_order(client, create_order):
    order = create_order()
    assert client.delete(f"/api/orders/{order['id']}").json() == {"success": True}
    assert client.get(f"/api/orders/{order['id']}").status_code == 404
