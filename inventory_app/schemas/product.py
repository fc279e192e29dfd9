from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator

DEFAULT_LOW_STOCK_THRESHOLD = 5

# Column limits: INTEGER columns and NUMERIC(10, 2) price
MAX_INT = 2_147_483_647
MAX_PRICE = Decimal("99999999.99")


def _strip_name(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("Product name must not be empty")
    return v


def _check_price(v: float | None) -> float | None:
    if v is None:
        return v
    amount = Decimal(str(v))
    if amount.as_tuple().exponent < -2:
        raise ValueError("Price must have at most 2 decimal places")
    if amount < Decimal("0.01"):
        raise ValueError("Price must be at least 0.01")
    if amount > MAX_PRICE:
        raise ValueError(f"Price must not exceed {MAX_PRICE}")
    return v


class ProductCreate(BaseModel):
    name: StrictStr = Field(max_length=255)
    description: StrictStr | None = None
    price: StrictFloat = Field(gt=0)
    quantity: StrictInt = Field(ge=0, le=MAX_INT)
    low_stock_threshold: StrictInt = Field(default=DEFAULT_LOW_STOCK_THRESHOLD, ge=0, le=MAX_INT)
    category_id: StrictInt | None = Field(default=None, ge=1, le=MAX_INT)

    model_config = {"extra": "forbid"}

    normalize_name = field_validator("name")(_strip_name)
    check_price = field_validator("price")(_check_price)


class ProductUpdate(BaseModel):
    """Partial update. Omitted or null fields keep their stored value,
    except category_id which is always written (null when omitted)."""

    name: StrictStr | None = Field(default=None, max_length=255)
    description: StrictStr | None = None
    price: StrictFloat | None = Field(default=None, gt=0)
    quantity: StrictInt | None = Field(default=None, ge=0, le=MAX_INT)
    low_stock_threshold: StrictInt | None = Field(default=None, ge=0, le=MAX_INT)
    category_id: StrictInt | None = Field(default=None, ge=1, le=MAX_INT)

    model_config = {"extra": "forbid"}

    normalize_name = field_validator("name")(_strip_name)
    check_price = field_validator("price")(_check_price)


class ProductOut(BaseModel):
    id: int
    name: str
    description: str | None
    price: float
    quantity: int
    low_stock_threshold: int
    category_id: int | None
    category_name: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductDeleted(BaseModel):
    message: str
    product: ProductOut
