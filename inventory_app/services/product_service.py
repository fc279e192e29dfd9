import logging

from sqlalchemy.orm import Session, joinedload

from inventory_app.database import atomic
from inventory_app.exceptions import NotFoundError, ValidationError
from inventory_app.models.category import Category
from inventory_app.models.inventory_log import InventoryLog
from inventory_app.models.product import Product, utcnow
from inventory_app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

# Fields that keep their stored value when omitted or null on update
MERGED_FIELDS = ("name", "description", "price", "quantity", "low_stock_threshold")


def _products(db: Session):
    return db.query(Product).options(joinedload(Product.category))


def _check_category(db: Session, category_id: int | None) -> None:
    if category_id is None:
        return
    if not db.query(Category.id).filter(Category.id == category_id).first():
        raise ValidationError(f"Category {category_id} does not exist")


def list_products(db: Session) -> list[Product]:
    return _products(db).order_by(Product.created_at.desc(), Product.id.desc()).all()


def get_product(db: Session, product_id: int) -> Product:
    product = _products(db).filter(Product.id == product_id).first()
    if not product:
        raise NotFoundError("Product not found")
    return product


def get_low_stock(db: Session) -> list[Product]:
    return (
        _products(db)
        .filter(Product.quantity <= Product.low_stock_threshold)
        .order_by(Product.quantity.asc(), Product.id.asc())
        .all()
    )


def create_product(db: Session, data: ProductCreate) -> Product:
    with atomic(db):
        _check_category(db, data.category_id)
        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            quantity=data.quantity,
            low_stock_threshold=data.low_stock_threshold,
            category_id=data.category_id,
        )
        db.add(product)
    logger.info("Created product %d (%s) with quantity %d", product.id, product.name, product.quantity)
    return get_product(db, product.id)


def update_product(db: Session, product_id: int, data: ProductUpdate) -> Product:
    with atomic(db):
        product = get_product(db, product_id)
        _check_category(db, data.category_id)
        for field in MERGED_FIELDS:
            value = getattr(data, field)
            if value is not None:
                setattr(product, field, value)
        product.category_id = data.category_id
        product.updated_at = utcnow()
    return get_product(db, product_id)


def delete_product(db: Session, product_id: int) -> Product:
    """Delete a product. Its inventory logs stay, detached from the product."""
    with atomic(db):
        product = get_product(db, product_id)
        db.query(InventoryLog).filter(InventoryLog.product_id == product_id).update(
            {InventoryLog.product_id: None}, synchronize_session=False
        )
        db.delete(product)
    logger.info("Deleted product %d (%s)", product_id, product.name)
    return product
