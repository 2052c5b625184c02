from datetime import datetime

from pydantic import BaseModel


# --- Variant schemas ---

class VariantCreate(BaseModel):
    size: str
    color: str
    sku: str
    stock: int = 0


class VariantOut(BaseModel):
    id: int
    product_id: int
    size: str
    color: str
    sku: str
    stock: int
    label: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


# --- Product schemas ---

class ProductCreate(BaseModel):
    name: str
    brand: str
    image_url: str | None = None
    variants: list[VariantCreate] = []


class ProductOut(BaseModel):
    id: int
    name: str
    brand: str
    image_url: str | None = None
    total_stock: int = 0
    variants: list[VariantOut] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
