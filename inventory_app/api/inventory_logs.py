from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_app.database import get_db
from inventory_app.schemas.inventory_log import InventoryAdjust, InventoryLogOut
from inventory_app.services import inventory_service

router = APIRouter(prefix="/inventory-logs", tags=["Inventory Logs"])


@router.get("", response_model=list[InventoryLogOut])
def list_inventory_logs(db: Session = Depends(get_db)):
    return inventory_service.list_inventory_logs(db)


@router.get("/product/{product_id}", response_model=list[InventoryLogOut])
def product_inventory_logs(product_id: int, db: Session = Depends(get_db)):
    return inventory_service.get_inventory_logs(db, product_id)


@router.post("", response_model=InventoryLogOut, status_code=201)
def adjust_inventory(data: InventoryAdjust, db: Session = Depends(get_db)):
    """Apply a stock change to a product and record it in the audit log."""
    return inventory_service.adjust_inventory(db, data)
