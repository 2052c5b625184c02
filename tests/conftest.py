from __future__ import annotations

import os

import pytest
from sqlalchemy.orm import sessionmaker

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOAD_SAMPLE_DATA"] = "false"
os.environ["DISPLAY_TIMEZONE"] = "UTC"

from brostok.database import Base, make_engine  # noqa: E402
from brostok.models import app_setting, product, stock_history, user  # noqa: E402,F401
from brostok.models.product import Product, Variant  # noqa: E402
from brostok.services import auth_service  # noqa: E402


@pytest.fixture()
def db_session():
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def admin(db_session):
    return auth_service.create_user(
        db_session, email="admin@example.com", password="secret123", name="Admin", role="admin"
    )


def _add_product(db, name: str, brand: str, variants: list[tuple[str, str, str, int]]) -> Product:
    p = Product(name=name, brand=brand)
    db.add(p)
    for size, color, sku, stock in variants:
        db.add(Variant(product=p, size=size, color=color, sku=sku, stock=stock))
    db.commit()
    db.refresh(p)
    return p


@pytest.fixture()
def catalog(db_session):
    """Two products, three variants with stock 5, 15 and 3."""
    polo = _add_product(
        db_session, "Kaos Polo", "Brand A",
        [("M", "Hitam", "POLO-M-HITAM", 5), ("L", "Putih", "POLO-L-PUTIH", 15)],
    )
    jeans = _add_product(db_session, "Celana Jeans", "Brand B", [("32", "Biru", "JEANS-32-BIRU", 3)])
    return {
        "polo": polo,
        "jeans": jeans,
        "polo_m": polo.variants[0],
        "polo_l": polo.variants[1],
        "jeans_32": jeans.variants[0],
    }
