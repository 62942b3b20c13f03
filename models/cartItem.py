from datetime import datetime

from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint

from models.base import Base, TimestampMixin


class CartItem(TimestampMixin, Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id"), nullable=False)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        {'sqlite_autoincrement': True},
    )


class CartItemDTO(BaseModel):
    id: int | None = None
    cart_id: int | None = None
    item_id: int | None = None
    quantity: int | None = Field(default=None, gt=0)
    created_at: datetime | None = None
    updated_at: datetime | None = None
