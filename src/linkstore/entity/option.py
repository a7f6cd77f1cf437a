from sqlalchemy import Column, Integer, String, JSON
from .base import Base, TimestampMixin


class OptionEntity(Base, TimestampMixin):
    __tablename__ = "options"

    option_id = Column(Integer, primary_key=True, autoincrement=True)
    option_name = Column(String(64), unique=True, nullable=False, index=True)
    option_value = Column(JSON, nullable=True)
