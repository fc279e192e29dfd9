from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_app.database import get_db
from inventory_app.schemas.dashboard import DashboardStats
from inventory_app.services import report_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(db: Session = Depends(get_db)):
    """Totals and low-stock items for the dashboard overview."""
    return report_service.inventory_summary(db)
