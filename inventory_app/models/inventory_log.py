from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_app.database import Base
from inventory_app.models.product import Product, utcnow


class InventoryLog(Base):
    """Tracks every inventory change for audit trail. Never updated or deleted."""

    __tablename__ = "inventory_logs"
    __table_args__ = (
        CheckConstraint(
            "change_type IN ('restock', 'sale', 'adjustment')", name="ck_inventory_logs_change_type"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Nulled when the product is deleted; the snapshot columns keep the entry readable
    product_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True
    )
    change_type: Mapped[str] = mapped_column(String(20), nullable=False)
    quantity_change: Mapped[int] = mapped_column(Integer, nullable=False)  # positive=in, negative=out
    previous_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    new_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    product: Mapped[Product | None] = relationship(Product)

    @property
    def product_name(self) -> str | None:
        return self.product.name if self.product else None
