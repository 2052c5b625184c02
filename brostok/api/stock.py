from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from brostok.api.auth import get_current_user
from brostok.database import get_db
from brostok.errors import InsufficientStock, NotFound, ValidationError
from brostok.models.stock_history import StockOperation
from brostok.models.user import User
from brostok.schemas.product import VariantOut
from brostok.schemas.stock import StockHistoryOut, StockOperationRequest
from brostok.services import inventory_service

router = APIRouter(prefix="/stock", tags=["Stock"])


@router.post("/operations", response_model=StockHistoryOut, status_code=201)
def apply_stock_operation(
    data: StockOperationRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return inventory_service.apply_stock_operation(
            db, data.variant_id, data.operation, data.quantity, data.note, user.id
        )
    except NotFound as e:
        raise HTTPException(404, str(e))
    except InsufficientStock as e:
        raise HTTPException(409, str(e))
    except ValidationError as e:
        raise HTTPException(422, str(e))


@router.get("/history", response_model=list[StockHistoryOut])
def stock_history(
    operation: StockOperation | None = Query(None),
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return inventory_service.filter_history(db, operation=operation, date_from=date_from, date_to=date_to)


@router.get("/low-stock", response_model=list[VariantOut])
def low_stock(
    threshold: int | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return inventory_service.compute_low_stock(db, threshold)
