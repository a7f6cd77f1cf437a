from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, String, Text
from .base import Base


class UrlEntity(Base):
    __tablename__ = "url"

    keyword = Column(String(100), primary_key=True)
    url = Column(Text, nullable=False)
    title = Column(Text, nullable=True)
    timestamp = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    ip = Column(String(41), nullable=False, default="")
    clicks = Column(Integer, nullable=False, default=0)
