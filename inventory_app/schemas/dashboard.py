from pydantic import BaseModel

from inventory_app.schemas.product import ProductOut


class DashboardStats(BaseModel):
    total_products: int
    total_quantity: int
    total_inventory_value: float
    low_stock_count: int
    low_stock_products: list[ProductOut]
