import csv
import io
from datetime import datetime

from sqlalchemy.orm import Session

from brostok.localtime import to_local
from brostok.models.product import Product
from brostok.models.stock_history import StockOperation
from brostok.services import inventory_service

PRODUCT_REPORT_FILENAME = "produk.csv"
HISTORY_REPORT_FILENAME = "riwayat_stok.csv"

PRODUCT_COLUMNS = ["Nama Produk", "Brand", "Total Varian", "Total Stok"]
HISTORY_COLUMNS = ["Tanggal", "Produk", "Varian", "Operasi", "Jumlah", "Catatan"]


def format_date_id(value: datetime | None) -> str:
    """Short Indonesian date in the display timezone, e.g. 5/3/2025."""
    if value is None:
        return ""
    local = to_local(value)
    return f"{local.day}/{local.month}/{local.year}"


def product_report_rows(db: Session) -> list[dict]:
    rows = []
    for p in inventory_service.list_products(db):
        rows.append({
            "Nama Produk": p.name,
            "Brand": p.brand,
            "Total Varian": len(p.variants),
            "Total Stok": p.total_stock,
        })
    return rows


def history_report_rows(db: Session) -> list[dict]:
    rows = []
    for entry in inventory_service.list_history(db):
        variant = entry.variant
        product: Product = variant.product
        rows.append({
            "Tanggal": format_date_id(entry.created_at),
            "Produk": product.name,
            "Varian": inventory_service.variant_label(variant),
            "Operasi": StockOperation(entry.operation).label,
            "Jumlah": entry.quantity_change,
            "Catatan": entry.note or "",
        })
    return rows


def rows_to_csv(rows: list[dict], columns: list[str]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=columns, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
    return buf.getvalue()


def product_report_csv(db: Session) -> str:
    return rows_to_csv(product_report_rows(db), PRODUCT_COLUMNS)


def history_report_csv(db: Session) -> str:
    return rows_to_csv(history_report_rows(db), HISTORY_COLUMNS)
