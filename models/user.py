from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String

from models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    username = Column(String, nullable=False, unique=True)
    # bcrypt hash, never the raw password
    password = Column(String, nullable=False)

    __table_args__ = {'sqlite_autoincrement': True}


class UserDTO(BaseModel):
    id: int | None = None
    username: str | None = None
    password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
