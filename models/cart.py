# cart is the single open basket of a user. Its content lives in cart_items.
from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, ForeignKey

from models.base import Base, TimestampMixin


class Cart(TimestampMixin, Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, unique=True)

    __table_args__ = {'sqlite_autoincrement': True}


class CartDTO(BaseModel):
    id: int | None = None
    user_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
