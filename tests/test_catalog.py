from __future__ import annotations

import pytest

from brostok.errors import ProductNotFound, ValidationError, VariantNotFound
from brostok.schemas.product import ProductCreate, VariantCreate
from brostok.services import inventory_service


def test_create_product_with_variants(db_session):
    product = inventory_service.create_product(
        db_session,
        ProductCreate(
            name="  Kemeja Flanel ",
            brand="Brand C",
            variants=[VariantCreate(size="S", color="Merah", sku="FLN-S-MERAH", stock=4)],
        ),
    )

    assert product.id is not None
    assert product.name == "Kemeja Flanel"
    assert product.image_url is None
    assert [v.sku for v in product.variants] == ["FLN-S-MERAH"]
    assert product.total_stock == 4


@pytest.mark.parametrize("name,brand", [("", "Brand"), ("Nama", ""), ("   ", "Brand")])
def test_create_product_requires_name_and_brand(db_session, name, brand):
    with pytest.raises(ValidationError, match="Nama dan brand harus diisi"):
        inventory_service.create_product(db_session, ProductCreate(name=name, brand=brand))
    assert inventory_service.list_products(db_session) == []


def test_create_variant_for_unknown_product(db_session):
    with pytest.raises(ProductNotFound):
        inventory_service.create_variant(db_session, 42, VariantCreate(size="M", color="Hitam", sku="X"))


def test_create_variant_rejects_negative_stock(db_session, catalog):
    with pytest.raises(ValidationError):
        inventory_service.create_variant(
            db_session, catalog["polo"].id, VariantCreate(size="XL", color="Hitam", sku="POLO-XL", stock=-1)
        )


def test_duplicate_sku_is_allowed(db_session, catalog):
    variant = inventory_service.create_variant(
        db_session, catalog["jeans"].id, VariantCreate(size="34", color="Biru", sku="JEANS-32-BIRU")
    )
    assert variant.stock == 0
    assert variant.label == "34 - Biru"
    assert len(inventory_service.list_variants(db_session, catalog["jeans"].id)) == 2


def test_get_missing_records(db_session):
    with pytest.raises(ProductNotFound):
        inventory_service.get_product(db_session, 1)
    with pytest.raises(VariantNotFound):
        inventory_service.get_variant(db_session, 1)


@pytest.mark.parametrize(
    "query,expected",
    [
        ("", ["Kaos Polo", "Celana Jeans"]),
        (None, ["Kaos Polo", "Celana Jeans"]),
        ("polo", ["Kaos Polo"]),
        ("JEANS", ["Celana Jeans"]),
        ("brand", ["Kaos Polo", "Celana Jeans"]),
        ("brand b", ["Celana Jeans"]),
        ("sepatu", []),
        ("%", []),
    ],
)
def test_search_products(db_session, catalog, query, expected):
    assert [p.name for p in inventory_service.search_products(db_session, query)] == expected


def test_invalid_later_variant_leaves_nothing_behind(db_session):
    with pytest.raises(ValidationError):
        inventory_service.create_product(
            db_session,
            ProductCreate(
                name="Rusak",
                brand="Brand X",
                variants=[
                    VariantCreate(size="M", color="Hitam", sku="RSK-M", stock=2),
                    VariantCreate(size="L", color="Hitam", sku="RSK-L", stock=-1),
                ],
            ),
        )

    inventory_service.create_product(db_session, ProductCreate(name="Topi", brand="Brand C"))

    assert [p.name for p in inventory_service.list_products(db_session)] == ["Topi"]
    assert inventory_service.list_variants(db_session) == []
