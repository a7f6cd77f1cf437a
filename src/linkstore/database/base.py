"""SQLAlchemy-backed storage handle.

Holds the one database connection of a process, plus the in-memory state the
rest of the application reads through it: options, keyword infos, plugins,
plugin pages, installed state and the admin page context.

Plugin authors should not use this object directly; use the service functions
(linkstore.service.option, linkstore.service.url) instead.
"""

import os
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, NoReturn, Optional

from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.orm import Session

from linkstore.database.profiler import QueryLogger
from linkstore.entity.base import Base
from linkstore.entity.dto import PluginPage
from linkstore.errors import FatalError, fatal_error
from linkstore.sandbox import include_file_sandbox
from linkstore.util import identity

DB_ERROR_PAGE = "db_error.py"

# Drivers with these paramstyles interpolate parameters client-side
CLIENT_SIDE_PARAMSTYLES = ("format", "pyformat")

SERVER_VERSION_QUERIES = {
    "sqlite": "select sqlite_version()",
    "mssql": "select @@version",
    "oracle": "select banner from v$version where rownum = 1",
}


class StorageHandle:

    def __init__(
        self,
        dsn: str,
        user: str = "",
        password: str = "",
        options: Optional[Dict[str, Any]] = None,
        attributes: Optional[Dict[str, Any]] = None,
        *,
        user_dir: Optional[str] = None,
        error_page: Callable[[str], bool] = include_file_sandbox,
        die: Callable[[str, str, int], NoReturn] = fatal_error,
        translate: Callable[[str], str] = identity,
        engine_factory: Callable[..., Engine] = create_engine,
        debug: bool = False,
    ):
        """
        Args:
            dsn: SQLAlchemy database URL
            user: username, overrides the one in the URL when set
            password: password, overrides the one in the URL when set
            options: keyword arguments for the engine
            attributes: driver connect arguments
            user_dir: directory searched for a custom db_error.py page
            error_page: runs the custom error page, returns True if it terminated
            die: fatal error display, must not return
            translate: message lookup used for the fatal error text
            engine_factory: builds the engine, create_engine by default
            debug: also emit every logged query through loguru
        """
        self.dsn = dsn
        self.user = user
        self.password = password
        self.options = dict(options or {})
        self.attributes = dict(attributes or {})
        self.user_dir = user_dir
        self.debug = debug

        self._error_page = error_page
        self._die = die
        self._translate = translate
        self._engine_factory = engine_factory

        self._engine: Optional[Engine] = None
        self._connection: Optional[Connection] = None
        self._is_emulate_prepare: Optional[bool] = None
        self._profiler = QueryLogger(debug=debug)

        self._context = ""
        self._infos: Dict[str, Any] = {}
        self._installed = False
        self._options: Dict[str, Any] = {}
        self._plugin_pages: Dict[str, PluginPage] = {}
        self._plugins: Dict[int, str] = {}
        self._next_plugin_position = 0

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Connect, probe prepare emulation, start the query profiler.

        Nothing touches the database before this, so the handle exists even
        when the connection fails and the fatal path can still use it.
        Call exactly once: a second call reconnects.
        """
        self.connect()
        self.set_emulate_state()
        self.start_profiler()

    def connect(self) -> None:
        """Open the real connection. Never returns on failure."""
        try:
            self._engine = self._engine_factory(
                self._url(), connect_args=self.attributes, **self.options
            )
            self._connection = self._engine.connect()
        except Exception as e:
            self._dead_or_error(e)
        logger.info("Connected to {} database", self._engine.dialect.name)

    @property
    def is_connected(self) -> bool:
        return self._connection is not None and not self._connection.closed

    def _url(self):
        url = make_url(self.dsn)
        if self.user:
            url = url.set(username=self.user, password=self.password or None)
        return url

    def _dead_or_error(self, exc: Exception) -> NoReturn:
        logger.error("Could not connect to database: {}: {}", type(exc).__name__, exc)

        if self.user_dir:
            page = os.path.join(self.user_dir, DB_ERROR_PAGE)
            if os.path.exists(page) and self._error_page(page) is True:
                raise FatalError(status=503)

        message = self._translate("Incorrect DB config, or could not connect to DB")
        message += f"<br/>{type(exc).__name__}: {exc}"
        title = self._translate("Fatal error")
        self._die(message, title, 503)
        raise FatalError(message, title, 503)

    def get_attribute(self, name: str) -> Any:
        """Read a driver attribute. Raises AttributeError if unsupported."""
        return getattr(self._connection.dialect, name)

    def set_emulate_state(self) -> None:
        # Some drivers cannot report this; treat that as "not emulating".
        try:
            paramstyle = self.get_attribute("paramstyle")
            self._is_emulate_prepare = paramstyle in CLIENT_SIDE_PARAMSTYLES
        except Exception as e:
            logger.debug("Cannot probe prepare emulation ({}), assuming off", e)
            self._is_emulate_prepare = False

    def get_emulate_state(self) -> bool:
        return self._is_emulate_prepare

    def start_profiler(self) -> None:
        """Log every executed statement into the query log."""
        if self._engine is None:
            logger.warning("Profiler not attached: no engine")
            return
        try:
            event.listen(self._engine, "before_cursor_execute", self._profiler.log_query)
        except Exception as e:
            logger.warning("Profiler not attached: {}", e)
            return
        logger.debug("Query profiler started")

    def get_server_version_string(self) -> str:
        """Raw version string reported by the server, not normalized."""
        dialect = self._connection.dialect.name
        query = SERVER_VERSION_QUERIES.get(dialect, "select version()")
        began = not self._connection.in_transaction()
        version = self._connection.exec_driver_sql(query).scalar()
        if began:
            self._connection.rollback()
        return str(version)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a Session bound to the held connection."""
        session = Session(bind=self._connection, expire_on_commit=False)
        try:
            yield session
            session.commit()
            if self._connection.in_transaction():
                self._connection.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Create all tables defined in the entity models."""
        # Import all entities to register them with Base
        import linkstore.entity.option  # noqa: F401
        import linkstore.entity.url  # noqa: F401

        Base.metadata.create_all(bind=self._connection)
        self._connection.commit()

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
        if self._engine is not None:
            self._engine.dispose()
        logger.debug("Database connection closed")

    # ------------------------------------------------------------------
    # Query log
    # ------------------------------------------------------------------

    def debug_log(self, message: str) -> None:
        """Record a diagnostic message next to the queries."""
        self._profiler.log(message)

    def get_debug_log(self) -> List[str]:
        return self._profiler.get_messages()

    def get_queries(self) -> List[str]:
        """Logged entries that are SQL statements."""
        return self._profiler.get_queries()

    def get_num_queries(self) -> int:
        return len(self.get_queries())

    # ------------------------------------------------------------------
    # Installed state and page context
    # ------------------------------------------------------------------

    def set_installed(self, installed: bool) -> None:
        self._installed = installed

    def is_installed(self) -> bool:
        return self._installed

    def set_html_context(self, context: str) -> None:
        self._context = context

    def get_html_context(self) -> str:
        return self._context

    # ------------------------------------------------------------------
    # Options, see linkstore.service.option
    # ------------------------------------------------------------------

    def set_option(self, name: str, value: Any) -> None:
        self._options[name] = value

    def has_option(self, name: str) -> bool:
        return name in self._options

    def get_option(self, name: str) -> Any:
        return self._options[name]

    def delete_option(self, name: str) -> None:
        self._options.pop(name, None)

    # ------------------------------------------------------------------
    # Keyword infos, see linkstore.service.url
    # ------------------------------------------------------------------

    def set_infos(self, keyword: str, infos: Any) -> None:
        self._infos[keyword] = infos

    def has_infos(self, keyword: str) -> bool:
        return keyword in self._infos

    def get_infos(self, keyword: str) -> Any:
        return self._infos[keyword]

    def delete_infos(self, keyword: str) -> None:
        self._infos.pop(keyword, None)

    # ------------------------------------------------------------------
    # Plugins
    # ------------------------------------------------------------------

    def get_plugins(self) -> List[str]:
        """Plugin filenames in load order."""
        return list(self._plugins.values())

    def get_plugin_positions(self) -> Dict[int, str]:
        return dict(self._plugins)

    def set_plugins(self, plugins: List[str]) -> None:
        self._plugins = dict(enumerate(plugins))
        self._next_plugin_position = len(self._plugins)

    def add_plugin(self, plugin: str) -> None:
        self._plugins[self._next_plugin_position] = plugin
        self._next_plugin_position += 1

    def remove_plugin(self, plugin: str) -> None:
        """Unset the slot holding this plugin; later positions are not shifted."""
        for position, name in self._plugins.items():
            if name == plugin:
                del self._plugins[position]
                return

    # ------------------------------------------------------------------
    # Plugin pages
    # ------------------------------------------------------------------

    def get_plugin_pages(self) -> Dict[str, PluginPage]:
        return dict(self._plugin_pages)

    def set_plugin_pages(self, pages: Mapping[str, PluginPage]) -> None:
        # Anything that is not a mapping resets the registry
        self._plugin_pages = dict(pages) if isinstance(pages, Mapping) else {}

    def add_plugin_page(self, slug: str, title: str, function: Callable) -> None:
        self._plugin_pages[slug] = PluginPage(slug=slug, title=title, function=function)

    def remove_plugin_page(self, slug: str) -> None:
        self._plugin_pages.pop(slug, None)
