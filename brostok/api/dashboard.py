from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from brostok.api.auth import get_current_user
from brostok.database import get_db
from brostok.errors import ValidationError
from brostok.schemas.stock import DashboardOut, ThresholdOut, ThresholdUpdate
from brostok.services import inventory_service

router = APIRouter(tags=["Dashboard"], dependencies=[Depends(get_current_user)])


@router.get("/dashboard", response_model=DashboardOut)
def dashboard(db: Session = Depends(get_db)):
    return inventory_service.dashboard_summary(db)


@router.get("/settings/low-stock-threshold", response_model=ThresholdOut)
def get_low_stock_threshold(db: Session = Depends(get_db)):
    return {"threshold": inventory_service.get_low_stock_threshold(db)}


@router.put("/settings/low-stock-threshold", response_model=ThresholdOut)
def update_low_stock_threshold(data: ThresholdUpdate, db: Session = Depends(get_db)):
    try:
        return {"threshold": inventory_service.set_low_stock_threshold(db, data.threshold)}
    except ValidationError as e:
        raise HTTPException(422, str(e))
