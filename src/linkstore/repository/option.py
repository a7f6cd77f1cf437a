"""Function-based option repository using SQLAlchemy sessions."""

from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from linkstore.entity.option import OptionEntity


def get_all_options(session: Session) -> Dict[str, Any]:
    rows = session.query(OptionEntity).all()
    return {row.option_name: row.option_value for row in rows}


def get_option(session: Session, name: str) -> Optional[OptionEntity]:
    return session.query(OptionEntity).filter_by(option_name=name).first()


def upsert_option(session: Session, name: str, value: Any) -> OptionEntity:
    row = get_option(session, name)
    if row:
        row.option_value = value
    else:
        row = OptionEntity(option_name=name, option_value=value)
        session.add(row)
    session.flush()
    return row


def delete_option(session: Session, name: str) -> bool:
    row = get_option(session, name)
    if not row:
        return False
    session.delete(row)
    session.flush()
    return True
