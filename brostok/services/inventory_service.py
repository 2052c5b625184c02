import logging
from datetime import date, datetime, timedelta

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from brostok.config import settings
from brostok.errors import (
    InsufficientStock,
    InvalidQuantity,
    ProductNotFound,
    ValidationError,
    VariantNotFound,
)
from brostok.localtime import local_day_start_utc
from brostok.models.app_setting import AppSetting
from brostok.models.product import Product, Variant
from brostok.models.stock_history import StockHistoryEntry, StockOperation
from brostok.schemas.product import ProductCreate, VariantCreate

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD_KEY = "low_stock_threshold"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_operation(operation) -> StockOperation:
    try:
        return StockOperation(operation)
    except ValueError:
        raise ValidationError(f"Jenis operasi tidak dikenal: {operation}")


def _require_text(*values: str | None) -> bool:
    return all(v is not None and v.strip() for v in values)


# --- Catalog ---

def _validate_variant(data: VariantCreate) -> None:
    if not _require_text(data.size, data.color, data.sku):
        raise ValidationError("Ukuran, warna, dan SKU harus diisi")
    if not _is_int(data.stock) or data.stock < 0:
        raise ValidationError("Stok awal tidak boleh negatif")


def _build_variant(product: Product, data: VariantCreate) -> Variant:
    _validate_variant(data)
    return Variant(
        product=product,
        size=data.size.strip(),
        color=data.color.strip(),
        sku=data.sku.strip(),
        stock=data.stock,
    )


def create_product(db: Session, data: ProductCreate) -> Product:
    if not _require_text(data.name, data.brand):
        raise ValidationError("Nama dan brand harus diisi")
    # Nothing touches the session until every variant is valid
    for v_data in data.variants:
        _validate_variant(v_data)
    product = Product(
        name=data.name.strip(),
        brand=data.brand.strip(),
        image_url=data.image_url or None,
    )
    db.add(product)
    for v_data in data.variants:
        db.add(_build_variant(product, v_data))
    db.commit()
    db.refresh(product)
    logger.info("Created product %s (%s) with %d variants", product.id, product.name, len(data.variants))
    return product


def get_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise ProductNotFound(product_id)
    return product


def list_products(db: Session) -> list[Product]:
    return db.query(Product).order_by(Product.id).all()


def search_products(db: Session, query: str | None) -> list[Product]:
    """Case-insensitive substring match on name or brand; blank query returns everything."""
    term = (query or "").strip().lower()
    q = db.query(Product)
    if term:
        q = q.filter(
            or_(
                func.lower(Product.name).contains(term, autoescape=True),
                func.lower(Product.brand).contains(term, autoescape=True),
            )
        )
    return q.order_by(Product.id).all()


def create_variant(db: Session, product_id: int, data: VariantCreate) -> Variant:
    product = get_product(db, product_id)
    variant = _build_variant(product, data)
    db.add(variant)
    db.commit()
    db.refresh(variant)
    logger.info("Created variant %s (%s) for product %s", variant.id, variant.sku, product_id)
    return variant


def get_variant(db: Session, variant_id: int) -> Variant:
    variant = db.query(Variant).filter(Variant.id == variant_id).first()
    if not variant:
        raise VariantNotFound(variant_id)
    return variant


def list_variants(db: Session, product_id: int | None = None) -> list[Variant]:
    q = db.query(Variant)
    if product_id is not None:
        get_product(db, product_id)
        q = q.filter(Variant.product_id == product_id)
    return q.order_by(Variant.id).all()


def variant_label(variant: Variant) -> str:
    return variant.label


# --- Stock operations ---

def apply_stock_operation(
    db: Session,
    variant_id: int,
    operation: StockOperation | str,
    quantity: int,
    note: str | None,
    user_id: int,
) -> StockHistoryEntry:
    """Apply one stock operation to a variant and record it in the history.

    ``in`` adds ``quantity``, ``out`` removes it (never below zero) and
    ``adjust`` sets ``quantity`` as the new absolute level. The variant update
    and the history entry are committed together; on any error neither is.
    """
    operation = _parse_operation(operation)
    if not _is_int(quantity) or quantity <= 0:
        raise InvalidQuantity(quantity)

    variant = db.query(Variant).filter(Variant.id == variant_id).with_for_update().first()
    if not variant:
        db.rollback()
        raise VariantNotFound(variant_id)

    current = variant.stock
    if operation is StockOperation.IN:
        new_stock = current + quantity
        change = quantity
    elif operation is StockOperation.OUT:
        if current < quantity:
            error = InsufficientStock(variant.id, current, quantity)
            db.rollback()
            raise error
        new_stock = current - quantity
        change = -quantity
    else:
        new_stock = quantity
        change = quantity - current

    variant.stock = new_stock
    entry = StockHistoryEntry(
        variant_id=variant.id,
        user_id=user_id,
        quantity_change=change,
        operation=operation.value,
        note=note or "",
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info(
        "Stock %s on variant %s by user %s: %+d (%d -> %d)",
        operation.value, variant.id, user_id, change, current, new_stock,
    )
    return entry


def list_history(db: Session) -> list[StockHistoryEntry]:
    return filter_history(db)


def filter_history(
    db: Session,
    operation: StockOperation | str | None = None,
    date_from: date | None = None,
    date_to: date | None = None,
) -> list[StockHistoryEntry]:
    """History entries matching every given filter, newest first.

    Both dates are inclusive calendar days in the display timezone.
    """
    q = db.query(StockHistoryEntry)
    if operation:
        q = q.filter(StockHistoryEntry.operation == _parse_operation(operation).value)
    if date_from:
        q = q.filter(StockHistoryEntry.created_at >= local_day_start_utc(_as_date(date_from)))
    if date_to:
        q = q.filter(StockHistoryEntry.created_at < local_day_start_utc(_as_date(date_to) + timedelta(days=1)))
    return q.order_by(StockHistoryEntry.id.desc()).all()


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


# --- Low stock ---

def get_low_stock_threshold(db: Session) -> int:
    row = db.get(AppSetting, LOW_STOCK_THRESHOLD_KEY)
    if row is None:
        return settings.LOW_STOCK_THRESHOLD
    return int(row.value)


def set_low_stock_threshold(db: Session, threshold: int) -> int:
    if not _is_int(threshold) or threshold < 0:
        raise ValidationError("Threshold stok rendah harus berupa bilangan bulat tidak negatif")
    row = db.get(AppSetting, LOW_STOCK_THRESHOLD_KEY)
    if row is None:
        db.add(AppSetting(key=LOW_STOCK_THRESHOLD_KEY, value=str(threshold)))
    else:
        row.value = str(threshold)
    db.commit()
    logger.info("Low stock threshold set to %d", threshold)
    return threshold


def compute_low_stock(db: Session, threshold: int | None = None) -> list[Variant]:
    if threshold is None:
        threshold = get_low_stock_threshold(db)
    return db.query(Variant).filter(Variant.stock < threshold).order_by(Variant.id).all()


def dashboard_summary(db: Session) -> dict:
    threshold = get_low_stock_threshold(db)
    low_stock = compute_low_stock(db, threshold)
    return {
        "total_products": db.query(Product).count(),
        "total_variants": db.query(Variant).count(),
        "low_stock_threshold": threshold,
        "low_stock_count": len(low_stock),
        "low_stock_items": [
            {
                "variant_id": v.id,
                "product_id": v.product_id,
                "product_name": v.product.name,
                "label": variant_label(v),
                "sku": v.sku,
                "stock": v.stock,
            }
            for v in low_stock
        ],
    }
