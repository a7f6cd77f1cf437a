"""Configuration loading from environment variables."""

import os

from dotenv import load_dotenv

TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUE_VALUES


def load_config():
    """Load configuration from environment variables."""
    load_dotenv()

    home = os.path.expanduser(os.environ.get("SHORTLINK_HOME", "~/.shortlink"))
    os.makedirs(home, exist_ok=True)

    cfg = {
        # Storage
        "database_url": os.getenv("DATABASE_URL") or f"sqlite:///{os.path.join(home, 'shortlink.db')}",
        "db_user": os.environ.get("SHORTLINK_DB_USER", ""),
        "db_pass": os.environ.get("SHORTLINK_DB_PASS", ""),

        # Custom pages such as db_error.py live here
        "user_dir": os.path.expanduser(os.environ.get("SHORTLINK_USER_DIR", os.path.join(home, "user"))),

        # Other settings
        "debug": _env_flag("SHORTLINK_DEBUG"),
        "fast_init": _env_flag("SHORTLINK_FAST_INIT"),
        "log_file": os.environ.get("SHORTLINK_LOG_FILE", ""),
    }

    return cfg
