from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from brostok.api.auth import get_current_user
from brostok.database import get_db
from brostok.services import export_service

router = APIRouter(prefix="/reports", tags=["Reports"], dependencies=[Depends(get_current_user)])


def _csv_response(content: str, filename: str) -> StreamingResponse:
    return StreamingResponse(
        iter([content]),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/products.csv")
def export_products(db: Session = Depends(get_db)):
    return _csv_response(export_service.product_report_csv(db), export_service.PRODUCT_REPORT_FILENAME)


@router.get("/history.csv")
def export_history(db: Session = Depends(get_db)):
    return _csv_response(export_service.history_report_csv(db), export_service.HISTORY_REPORT_FILENAME)
