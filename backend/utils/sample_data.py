# utils/sample_data.py
"""Demo data set used by ``POST /api/seed-test-data``.

Rows are generated from a fixed random seed, so every run produces the same
customers, products and orders.
"""
import random
from datetime import datetime, timedelta, timezone
from typing import Dict, List

# Configuration
RANDOM_SEED = 2024
ORDER_DATE_START = datetime(2024, 1, 8, 9, 0, tzinfo=timezone.utc)
# End Configuration

SAMPLE_CUSTOMERS = [
    ("demo-cust-1", "Anadolu Lokum A.Ş.", "Ayşe Demir", "Gaziantep"),
    ("demo-cust-2", "Ege Çay Ltd.", "Mehmet Kaya", "İzmir"),
    ("demo-cust-3", "Boğaziçi Kuruyemiş", "Zeynep Arslan", "İstanbul"),
]

# code, name, type, shape, (length, width, depth)
SAMPLE_PRODUCTS = [
    ("PRC-KR-100", "Kare Lokum Kutusu 100x100", "percinli", "Kare", (100, 100, 40)),
    ("PRC-YV-120", "Yuvarlak Çay Kutusu Ø120", "percinli", "Yuvarlak", (120, 120, 160)),
    ("PRC-DK-180", "Dikdörtgen Hediye Kutusu", "percinli", "Dikdörtgen", (180, 240, 60)),
    ("SVM-ST-090", "Sıvama Kalp Kutu", "sivama", "Standart", (90, 90, 30)),
]

# Status of each generated order, in creation order
SAMPLE_STATUSES = [
    "created",
    "offer_sent",
    "waiting_manager_approval",
    "supply_design_process",
    "production_started",
    "invoice_added",
    "order_completed",
]


def _product_rows() -> List[dict]:
    rows = []
    for index, (code, name, product_type, shape, (length, width, depth)) in enumerate(SAMPLE_PRODUCTS, start=1):
        rows.append({
            "id": f"demo-prod-{index}",
            "code": code,
            "name": name,
            "product_type": product_type,
            "box_shape": shape,
            "dimensions": {"length": length, "width": width, "depth": depth},
            "inks": {"cmyk": True, "pantones": ["186 C"] if index % 2 else []},
            "features": {"has_lid": True, "has_window": index == 3},
            "details": None,
        })
    return rows


def _order_line(rng: random.Random, product: dict) -> dict:
    quantity = rng.choice([500, 1000, 2500, 5000])
    unit_price = round(rng.uniform(4.5, 28.0), 2)
    return {
        "product_id": product["id"],
        "product_name": product["name"],
        "quantity": quantity,
        "unit_price": unit_price,
        "vat_rate": 20,
    }


def _order_rows(rng: random.Random, products: List[dict]) -> List[dict]:
    rows = []
    for index, status in enumerate(SAMPLE_STATUSES, start=1):
        cust_id, company, _, _ = SAMPLE_CUSTOMERS[index % len(SAMPLE_CUSTOMERS)]
        lines = [_order_line(rng, p) for p in rng.sample(products, k=rng.randint(1, 2))]
        subtotal = round(sum(l["quantity"] * l["unit_price"] for l in lines), 2)
        vat_total = round(subtotal * 0.2, 2)
        rows.append({
            "id": f"demo-order-{index}",
            "customer_id": cust_id,
            "customer_name": company,
            "items": lines,
            "currency": "TRY",
            "subtotal": subtotal,
            "vat_total": vat_total,
            "grand_total": round(subtotal + vat_total, 2),
            "status": status,
            "deadline": (ORDER_DATE_START + timedelta(days=30 + index * 7)).date().isoformat(),
            "created_at": ORDER_DATE_START + timedelta(days=index * 3),
        })
    return rows


def _stock_rows(rng: random.Random, products: List[dict]) -> List[dict]:
    rows = []
    for index, product in enumerate(products, start=1):
        rows.append({
            "id": f"demo-stock-{index}",
            "stock_number": f"STK-{index:04d}",
            "company": "Symi Ambalaj",
            "product": product["name"],
            "quantity": float(rng.randint(200, 3000)),
            "unit": "adet",
            "category": "finished",
            "product_id": product["id"],
            "notes": None,
        })
    return rows


def build_sample_rows() -> Dict[str, List[dict]]:
    """Column values keyed by table name, in foreign key order."""
    rng = random.Random(RANDOM_SEED)
    products = _product_rows()
    customers = [
        {"id": cid, "company_name": company, "contact_name": contact, "address": city}
        for cid, company, contact, city in SAMPLE_CUSTOMERS
    ]
    return {
        "customers": customers,
        "products": products,
        "orders": _order_rows(rng, products),
        "stock_items": _stock_rows(rng, products),
    }
