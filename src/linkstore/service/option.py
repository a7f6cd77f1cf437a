"""Option service: read-through access to the handle's option cache."""

from typing import Any, Dict
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from linkstore.database.base import StorageHandle
from linkstore.repository import option as option_repo


def preload_options(handle: StorageHandle) -> bool:
    """Read all options at once into the cache.

    A readable options table means the application is installed. Returns the
    installed state.
    """
    try:
        with handle.session() as session:
            options = option_repo.get_all_options(session)
    except SQLAlchemyError as e:
        logger.warning("Could not read options, assuming not installed: {}", e)
        handle.set_installed(False)
        return False

    for name, value in options.items():
        handle.set_option(name, value)
    handle.set_installed(True)
    logger.debug("Preloaded {} option(s)", len(options))
    return True


def get_option(handle: StorageHandle, name: str, default: Any = None) -> Any:
    if handle.has_option(name):
        return handle.get_option(name)

    with handle.session() as session:
        row = option_repo.get_option(session, name)
        if row is None:
            return default
        value = row.option_value
    handle.set_option(name, value)
    return value


def update_option(handle: StorageHandle, name: str, value: Any) -> None:
    with handle.session() as session:
        option_repo.upsert_option(session, name, value)
    handle.set_option(name, value)


def delete_option(handle: StorageHandle, name: str) -> bool:
    with handle.session() as session:
        deleted = option_repo.delete_option(session, name)
    handle.delete_option(name)
    return deleted


def list_options(handle: StorageHandle) -> Dict[str, Any]:
    """All stored options; refreshes the cache as a side effect."""
    with handle.session() as session:
        options = option_repo.get_all_options(session)
    for name, value in options.items():
        handle.set_option(name, value)
    return options
