from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_app.database import get_db
from inventory_app.schemas.category import CategoryDeleted, CategoryIn, CategoryOut
from inventory_app.services import category_service

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return category_service.list_categories(db)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return category_service.get_category(db, category_id)


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(data: CategoryIn, db: Session = Depends(get_db)):
    return category_service.create_category(db, data)


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, data: CategoryIn, db: Session = Depends(get_db)):
    return category_service.update_category(db, category_id, data)


@router.delete("/{category_id}", response_model=CategoryDeleted)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    category = category_service.delete_category(db, category_id)
    return {"message": "Category deleted successfully", "category": category}
