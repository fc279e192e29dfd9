"""Inventory adjustment workflow and audit log queries.

An adjustment reads the product's quantity under a row lock, rejects any
change that would take it below zero, then writes the new quantity and an
immutable log entry in the same transaction.
"""
import logging

from sqlalchemy import select, update
from sqlalchemy.orm import Session, joinedload

from inventory_app.database import atomic
from inventory_app.exceptions import ConflictError, NotFoundError, ValidationError
from inventory_app.models.inventory_log import InventoryLog
from inventory_app.models.product import Product, utcnow
from inventory_app.schemas.inventory_log import InventoryAdjust
from inventory_app.schemas.product import MAX_INT

logger = logging.getLogger(__name__)


def adjust_inventory(db: Session, data: InventoryAdjust) -> InventoryLog:
    with atomic(db):
        previous_quantity = db.execute(
            select(Product.quantity).where(Product.id == data.product_id).with_for_update()
        ).scalar_one_or_none()
        if previous_quantity is None:
            raise NotFoundError("Product not found")

        new_quantity = previous_quantity + data.quantity_change
        if new_quantity < 0:
            logger.warning(
                "Rejected %s of %d on product %d: only %d in stock",
                data.change_type, data.quantity_change, data.product_id, previous_quantity,
            )
            raise ValidationError(
                "Insufficient quantity. Cannot reduce below 0.",
                error=f"Current: {previous_quantity}, requested change: {data.quantity_change}",
            )
        if new_quantity > MAX_INT:
            raise ValidationError(
                f"Quantity cannot exceed {MAX_INT}",
                error=f"Current: {previous_quantity}, requested change: {data.quantity_change}",
            )

        # Guard against a writer that slipped in on back ends without row locks
        result = db.execute(
            update(Product)
            .where(Product.id == data.product_id, Product.quantity == previous_quantity)
            .values(quantity=new_quantity, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise ConflictError("Product quantity changed concurrently, please retry")

        log = InventoryLog(
            product_id=data.product_id,
            change_type=data.change_type,
            quantity_change=data.quantity_change,
            previous_quantity=previous_quantity,
            new_quantity=new_quantity,
            notes=data.notes,
        )
        db.add(log)

    logger.info(
        "Product %d %s %+d: %d -> %d",
        data.product_id, data.change_type, data.quantity_change, previous_quantity, new_quantity,
    )
    return _logs(db).filter(InventoryLog.id == log.id).one()


def _logs(db: Session):
    return (
        db.query(InventoryLog)
        .options(joinedload(InventoryLog.product))
        .order_by(InventoryLog.created_at.desc(), InventoryLog.id.desc())
    )


def list_inventory_logs(db: Session) -> list[InventoryLog]:
    return _logs(db).all()


def get_inventory_logs(db: Session, product_id: int) -> list[InventoryLog]:
    return _logs(db).filter(InventoryLog.product_id == product_id).all()
