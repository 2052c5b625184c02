import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from brostok.api import auth, dashboard, products, reports, stock
from brostok.config import settings
from brostok.database import SessionLocal, init_db
from brostok.models.stock_history import OPERATION_LABELS
from brostok.services.auth_service import ensure_default_admin
from brostok.services.seed_service import load_sample_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    db = SessionLocal()
    try:
        ensure_default_admin(db)
        if settings.LOAD_SAMPLE_DATA:
            load_sample_data(db)
    finally:
        db.close()
    yield


app = FastAPI(
    title="bro.stok API",
    description="Product catalog, variant stock ledger, low-stock dashboard and CSV reports",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Return JSON for unhandled exceptions so frontend can parse error."""
    logger.error("Unhandled error: %s\n%s", exc, traceback.format_exc())
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.include_router(auth.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")
app.include_router(stock.router, prefix="/api/v1")
app.include_router(dashboard.router, prefix="/api/v1")
app.include_router(reports.router, prefix="/api/v1")


@app.get("/api/v1/config")
def get_config():
    """Public settings a client needs to render forms and labels."""
    return {
        "app_name": settings.APP_NAME,
        "min_password_length": settings.MIN_PASSWORD_LENGTH,
        "display_timezone": settings.DISPLAY_TIMEZONE,
        "operation_labels": {op.value: label for op, label in OPERATION_LABELS.items()},
    }


@app.get("/health")
def health():
    return {"status": "ok"}
