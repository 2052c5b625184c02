from datetime import datetime

from pydantic import BaseModel

from brostok.models.stock_history import StockOperation


class StockOperationRequest(BaseModel):
    variant_id: int
    operation: StockOperation
    quantity: int
    note: str = ""


class StockHistoryOut(BaseModel):
    id: int
    variant_id: int
    user_id: int
    quantity_change: int
    operation: StockOperation
    operation_label: str
    note: str = ""
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class LowStockItem(BaseModel):
    variant_id: int
    product_id: int
    product_name: str
    label: str
    sku: str
    stock: int


class DashboardOut(BaseModel):
    total_products: int
    total_variants: int
    low_stock_threshold: int
    low_stock_count: int
    low_stock_items: list[LowStockItem] = []


class ThresholdUpdate(BaseModel):
    threshold: int


class ThresholdOut(BaseModel):
    threshold: int
