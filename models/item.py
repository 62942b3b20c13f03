from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from sqlalchemy import Column, Integer, String, Float, Boolean, Text, CheckConstraint

from models.base import Base, TimestampMixin


# Item is a catalog entry. The catalog is rebuilt from seed_data/catalog.json
# on every start, so only the name is a stable key across restarts.
class Item(TimestampMixin, Base):
    __tablename__ = 'items'

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    category = Column(String, nullable=False)
    rating = Column(Float, nullable=False, default=0.0)
    reviews = Column(Integer, nullable=False, default=0)
    image = Column(String, nullable=False, default="")
    in_stock = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
        CheckConstraint('rating >= 0 AND rating <= 5', name='check_rating_range'),
        CheckConstraint('reviews >= 0', name='check_reviews_non_negative'),
        {'sqlite_autoincrement': True},
    )


class ItemDTO(BaseModel):
    id: int | None = None
    name: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    category: str | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    reviews: int | None = Field(default=None, ge=0)
    image: str | None = None
    in_stock: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator('name', 'category', mode='before')
    @classmethod
    def validate_not_blank(cls, v):
        """Names and categories are shown in listings and must not be empty."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be blank")
        return v
