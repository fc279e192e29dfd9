from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, StrictInt, StrictStr

from inventory_app.schemas.product import MAX_INT

ChangeType = Literal["restock", "sale", "adjustment"]


class InventoryAdjust(BaseModel):
    product_id: StrictInt = Field(ge=1, le=MAX_INT)
    change_type: ChangeType
    quantity_change: StrictInt = Field(ge=-MAX_INT, le=MAX_INT)  # positive to add, negative to remove
    notes: StrictStr | None = None

    model_config = {"extra": "forbid"}


class InventoryLogOut(BaseModel):
    id: int
    product_id: int | None
    product_name: str | None = None
    change_type: str
    quantity_change: int
    previous_quantity: int
    new_quantity: int
    notes: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
