"""Build the storage handle from settings. Callers own the returned handle."""

from linkstore.database.base import StorageHandle


def build_storage(cfg: dict, **kwargs) -> StorageHandle:
    """Construct, but do not initialize, a StorageHandle."""
    return StorageHandle(
        cfg["database_url"],
        cfg.get("db_user", ""),
        cfg.get("db_pass", ""),
        user_dir=cfg.get("user_dir"),
        debug=cfg.get("debug", False),
        **kwargs,
    )
