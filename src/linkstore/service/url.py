"""Short URL service: keyword infos cached on the handle for the request."""

from typing import Optional
from linkstore.database.base import StorageHandle
from linkstore.entity.dto import KeywordInfo
from linkstore.repository import url as url_repo


def get_keyword_infos(handle: StorageHandle, keyword: str) -> Optional[KeywordInfo]:
    if handle.has_infos(keyword):
        return handle.get_infos(keyword)

    with handle.session() as session:
        infos = url_repo.get_url(session, keyword)
    if infos is not None:
        handle.set_infos(keyword, infos)
    return infos


def add_url(handle: StorageHandle, keyword: str, url: str, title: Optional[str] = None, ip: str = "") -> KeywordInfo:
    with handle.session() as session:
        infos = url_repo.add_url(session, keyword, url, title=title, ip=ip)
    handle.set_infos(keyword, infos)
    return infos
