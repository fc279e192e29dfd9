import logging

from sqlalchemy.orm import Session

from inventory_app.database import atomic
from inventory_app.exceptions import NotFoundError
from inventory_app.models.category import Category
from inventory_app.models.product import Product
from inventory_app.schemas.category import CategoryIn

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "Category name already exists"


def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category(db: Session, category_id: int) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category:
        raise NotFoundError("Category not found")
    return category


def create_category(db: Session, data: CategoryIn) -> Category:
    category = Category(name=data.name)
    with atomic(db, conflict_message=DUPLICATE_NAME):
        db.add(category)
    db.refresh(category)
    logger.info("Created category %d (%s)", category.id, category.name)
    return category


def update_category(db: Session, category_id: int, data: CategoryIn) -> Category:
    with atomic(db, conflict_message=DUPLICATE_NAME):
        category = get_category(db, category_id)
        category.name = data.name
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> Category:
    """Delete a category; products that referenced it become uncategorized."""
    with atomic(db):
        category = get_category(db, category_id)
        detached = (
            db.query(Product)
            .filter(Product.category_id == category_id)
            .update({Product.category_id: None}, synchronize_session=False)
        )
        db.delete(category)
    if detached:
        logger.info("Deleted category %d, %d products left uncategorized", category_id, detached)
    return category
