from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from brostok.api.auth import get_current_user
from brostok.database import get_db
from brostok.errors import NotFound, ValidationError
from brostok.schemas.product import ProductCreate, ProductOut, VariantCreate, VariantOut
from brostok.services import inventory_service

router = APIRouter(prefix="/products", tags=["Products"], dependencies=[Depends(get_current_user)])


@router.post("", response_model=ProductOut, status_code=201)
def create_product(data: ProductCreate, db: Session = Depends(get_db)):
    try:
        return inventory_service.create_product(db, data)
    except ValidationError as e:
        raise HTTPException(422, str(e))


@router.get("", response_model=list[ProductOut])
def list_products(q: str | None = None, db: Session = Depends(get_db)):
    return inventory_service.search_products(db, q)


@router.get("/variants/{variant_id}", response_model=VariantOut)
def get_variant(variant_id: int, db: Session = Depends(get_db)):
    try:
        return inventory_service.get_variant(db, variant_id)
    except NotFound as e:
        raise HTTPException(404, str(e))


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        return inventory_service.get_product(db, product_id)
    except NotFound as e:
        raise HTTPException(404, str(e))


# --- Variant endpoints ---

@router.post("/{product_id}/variants", response_model=VariantOut, status_code=201)
def create_variant(product_id: int, data: VariantCreate, db: Session = Depends(get_db)):
    try:
        return inventory_service.create_variant(db, product_id, data)
    except NotFound as e:
        raise HTTPException(404, str(e))
    except ValidationError as e:
        raise HTTPException(422, str(e))


@router.get("/{product_id}/variants", response_model=list[VariantOut])
def list_variants(product_id: int, db: Session = Depends(get_db)):
    try:
        return inventory_service.list_variants(db, product_id)
    except NotFound as e:
        raise HTTPException(404, str(e))
