"""Function-based short URL repository using SQLAlchemy sessions."""

from typing import Optional
from sqlalchemy.orm import Session
from linkstore.entity.url import UrlEntity
from linkstore.entity.dto import KeywordInfo


def _entity_to_dto(entity: UrlEntity) -> KeywordInfo:
    return KeywordInfo(
        keyword=entity.keyword,
        url=entity.url,
        title=entity.title,
        timestamp=entity.timestamp,
        ip=entity.ip,
        clicks=entity.clicks,
    )


def get_url(session: Session, keyword: str) -> Optional[KeywordInfo]:
    row = session.get(UrlEntity, keyword)
    if row:
        return _entity_to_dto(row)
    return None


def add_url(session: Session, keyword: str, url: str, title: Optional[str] = None, ip: str = "") -> KeywordInfo:
    row = UrlEntity(keyword=keyword, url=url, title=title, ip=ip, clicks=0)
    session.add(row)
    session.flush()
    return _entity_to_dto(row)
