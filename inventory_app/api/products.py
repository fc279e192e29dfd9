from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_app.database import get_db
from inventory_app.schemas.product import ProductCreate, ProductDeleted, ProductOut, ProductUpdate
from inventory_app.services import product_service

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return product_service.list_products(db)


# Must be registered before /{product_id}
@router.get("/low-stock", response_model=list[ProductOut])
def low_stock(db: Session = Depends(get_db)):
    return product_service.get_low_stock(db)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return product_service.get_product(db, product_id)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(data: ProductCreate, db: Session = Depends(get_db)):
    return product_service.create_product(db, data)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, data: ProductUpdate, db: Session = Depends(get_db)):
    return product_service.update_product(db, product_id, data)


@router.delete("/{product_id}", response_model=ProductDeleted)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    product = product_service.delete_product(db, product_id)
    return {"message": "Product deleted successfully", "product": product}
