from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from brostok.config import settings


def make_engine(url: str):
    connect_args = {}
    kwargs = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        # In-memory SQLite lives inside a single connection; share it
        if url == "sqlite://" or ":memory:" in url:
            kwargs["poolclass"] = StaticPool
    return create_engine(url, connect_args=connect_args, **kwargs)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    # Import all models so Base.metadata knows about them
    import brostok.models.product  # noqa: F401
    import brostok.models.stock_history  # noqa: F401
    import brostok.models.user  # noqa: F401
    import brostok.models.app_setting  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
