# utils/seed.py
import logging
from typing import List, Tuple

from sqlalchemy.orm import Session

from config import settings
from models.mold import ProductMold
from models.users import Role, User
from utils.hashing import get_password_hash
from utils import workflow

logger = logging.getLogger(__name__)

ADMIN_ROLE_ID = "1"

# Department roles created on an empty database (id, name, permissions)
DEFAULT_ROLES = [
    (ADMIN_ROLE_ID, workflow.ROLE_ADMIN, ["all"]),
    ("2", workflow.ROLE_GENERAL_MANAGER, ["all_except_settings"]),
    ("3", "Satış", ["products", "recipes", "orders", "dashboard"]),
    ("4", workflow.ROLE_DESIGN, ["design", "dashboard"]),
    ("5", workflow.ROLE_PRINTING, ["procurement", "dashboard"]),
    ("6", workflow.ROLE_FACTORY, ["production", "logistics", "dashboard"]),
    ("7", workflow.ROLE_ACCOUNTING, ["accounting", "dashboard"]),
    ("8", workflow.ROLE_SHIPPING, ["logistics", "dashboard"]),
]


def _molds(product_type: str, shape: str, sizes, label=None) -> List[dict]:
    return [
        {"product_type": product_type, "box_shape": shape, "dimensions": str(size),
         "label": label(size) if label else None}
        for size in sizes
    ]


DEFAULT_MOLDS: List[dict] = [
    *_molds("percinli", "Kare", [
        "55x55", "75x75", "85x85", "90x90", "100x100", "120x120", "155x155", "190x190", "215x215", "235x235",
    ]),
    *_molds("percinli", "Oval", ["60x70", "83x103", "143x232", "200x300"]),
    *_molds("percinli", "Sekizgen", ["85x110", "220x220", "190x275"]),
    *_molds("percinli", "Dikdörtgen", [
        "45x65", "80x120", "80x140", "90x150", "100x75", "100x130", "110x150", "115x190",
        "135x190", "140x240", "155x195", "170x260", "180x225", "180x240", "215x235", "200x300",
    ]),
    *_molds("percinli", "Yuvarlak", [
        42, 52, 55, 65, 69, 73, 82, 85, 90, 99, 105, 108, 120, 140, 153, 160, 175, 190, 200, 215, 240, 265,
    ], label=lambda d: f"Ø{d}"),
    *_molds("percinli", "Kalpli", ["90x90", "90x90x25", "205x190x40", "235x235"]),
    {"product_type": "percinli", "box_shape": "Tepsi", "dimensions": "304x234", "label": "304x234"},
    {"product_type": "percinli", "box_shape": "Tepsi", "dimensions": "357x272", "label": "357x272"},
    {"product_type": "percinli", "box_shape": "Tepsi", "dimensions": "362x245", "label": "362x245 (Dalgalı)"},
    {"product_type": "percinli", "box_shape": "Tepsi", "dimensions": "315x215", "label": "315x215"},
    {"product_type": "percinli", "box_shape": "Tepsi", "dimensions": "400x400", "label": "Ø400"},
    *_molds("percinli", "Konik", ["130x165x160", "130x165x140", "90x120x105"]),
    *_molds("sivama", "Standart", [
        "90x90x30 - Kalp Şekilli", "205x190x40 - Kalp Şekilli", "75x205x25",
        "65x205x25 - Fermuarlı", "105x205x25 - Fermuarlı", "135x200x25 - Fermuarlı",
        "175x215x45", "90x80x15", "90x80x30", "100x100x30", "105x105x40", "97x58x20",
        "94x58x20", "95x120x22", "69x45", "85x40", "99x30", "105x40 - Expanded",
        "132x45 - Expanded", "O115 - Bardak Altlığı",
    ]),
]


def seed_roles(db: Session) -> int:
    if db.query(Role).count() > 0:
        return 0
    for role_id, name, permissions in DEFAULT_ROLES:
        db.add(Role(id=role_id, name=name, permissions=permissions))
    db.commit()
    logger.info("Seeded %d default roles", len(DEFAULT_ROLES))
    return len(DEFAULT_ROLES)


def seed_admin(db: Session) -> bool:
    if db.query(User).count() > 0:
        return False
    admin_role = db.get(Role, ADMIN_ROLE_ID) or db.query(Role).filter(Role.name == workflow.ROLE_ADMIN).first()
    if admin_role is None:
        logger.warning("No admin role found, skipping admin user")
        return False
    db.add(User(
        id="admin-user-id",
        username=settings.ADMIN_USERNAME,
        password_hash=get_password_hash(settings.ADMIN_PASSWORD),
        role_id=admin_role.id,
        full_name="System Admin",
        is_active=True,
    ))
    db.commit()
    logger.info("Created admin user %r", settings.ADMIN_USERNAME)
    return True


def seed_molds(db: Session) -> Tuple[int, int]:
    """Insert catalog molds missing by (type, shape, dimensions). Returns (inserted, skipped)."""
    existing = {
        (m.product_type, m.box_shape, m.dimensions)
        for m in db.query(ProductMold.product_type, ProductMold.box_shape, ProductMold.dimensions)
    }
    inserted = skipped = 0
    for mold in DEFAULT_MOLDS:
        key = (mold["product_type"], mold["box_shape"], mold["dimensions"])
        if key in existing:
            skipped += 1
            continue
        db.add(ProductMold(**mold))
        existing.add(key)
        inserted += 1
    db.commit()
    if inserted:
        logger.info("Seeded %d default molds (%d already present)", inserted, skipped)
    return inserted, skipped


def seed_defaults(db: Session) -> None:
    seed_roles(db)
    seed_admin(db)
    seed_molds(db)
