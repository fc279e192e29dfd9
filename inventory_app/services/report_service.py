from sqlalchemy import func
from sqlalchemy.orm import Session

from inventory_app.models.product import Product
from inventory_app.services import product_service


def inventory_summary(db: Session) -> dict:
    total_products, total_quantity, total_value = db.query(
        func.count(Product.id),
        func.coalesce(func.sum(Product.quantity), 0),
        func.coalesce(func.sum(Product.price * Product.quantity), 0),
    ).one()
    low_stock = product_service.get_low_stock(db)

    return {
        "total_products": total_products,
        "total_quantity": int(total_quantity),
        "total_inventory_value": round(float(total_value), 2),
        "low_stock_count": len(low_stock),
        "low_stock_products": low_stock,
    }
