import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from brostok.models.product import Product, Variant
from brostok.models.stock_history import StockHistoryEntry, StockOperation
from brostok.models.user import User
from brostok.services.auth_service import ensure_default_admin

logger = logging.getLogger(__name__)

SAMPLE_CATALOG = [
    {
        "name": "Kaos Polo",
        "brand": "Brand A",
        "variants": [
            {"size": "M", "color": "Hitam", "sku": "POLO-M-HITAM", "stock": 5},
            {"size": "L", "color": "Putih", "sku": "POLO-L-PUTIH", "stock": 15},
        ],
    },
    {
        "name": "Celana Jeans",
        "brand": "Brand B",
        "variants": [
            {"size": "32", "color": "Biru", "sku": "JEANS-32-BIRU", "stock": 3},
        ],
    },
]


def load_sample_data(db: Session) -> bool:
    """Fill an empty catalog with the demo products. Returns False if anything exists already."""
    if db.query(Product).count() > 0:
        return False

    admin = ensure_default_admin(db) or db.query(User).order_by(User.id).first()

    first_variant = None
    for p_data in SAMPLE_CATALOG:
        product = Product(name=p_data["name"], brand=p_data["brand"])
        db.add(product)
        for v_data in p_data["variants"]:
            variant = Variant(product=product, **v_data)
            db.add(variant)
            if first_variant is None:
                first_variant = variant
    db.flush()

    # Stored timestamps are naive UTC, matching the database's now()
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    db.add(StockHistoryEntry(
        variant_id=first_variant.id,
        user_id=admin.id,
        quantity_change=10,
        operation=StockOperation.IN.value,
        note="Stok awal",
        created_at=now - timedelta(days=1),
    ))
    db.flush()
    db.add(StockHistoryEntry(
        variant_id=first_variant.id,
        user_id=admin.id,
        quantity_change=-5,
        operation=StockOperation.OUT.value,
        note="Penjualan",
        created_at=now - timedelta(hours=12),
    ))
    db.commit()
    logger.info("Loaded sample catalog: %d products", len(SAMPLE_CATALOG))
    return True
