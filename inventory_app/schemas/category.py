from datetime import datetime

from pydantic import BaseModel, Field, StrictStr, field_validator


class CategoryIn(BaseModel):
    name: StrictStr = Field(max_length=100)

    model_config = {"extra": "forbid"}

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name is required")
        return v


class CategoryOut(BaseModel):
    id: int
    name: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class CategoryDeleted(BaseModel):
    message: str
    category: CategoryOut
