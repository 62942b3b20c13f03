from datetime import datetime

from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, Float, ForeignKey, Text, CheckConstraint, Enum as SQLEnum

from enums.order_status import OrderStatus
from models.base import Base, TimestampMixin


class Order(TimestampMixin, Base):
    __tablename__ = 'orders'

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    status = Column(SQLEnum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    total = Column(Float, nullable=False, default=0.0)

    # Items Snapshot (JSON)
    # Line items as they were at checkout, so the order survives a catalog refresh
    # Format: [{"item_id": 1, "name": "Smart Home Hub", "price": 199.99, "quantity": 2}]
    items_snapshot = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint('total >= 0', name='check_total_non_negative'),
        {'sqlite_autoincrement': True},
    )


class OrderDTO(BaseModel):
    id: int | None = None
    user_id: int | None = None
    status: OrderStatus | None = None
    total: float | None = Field(default=None, ge=0)
    items_snapshot: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
