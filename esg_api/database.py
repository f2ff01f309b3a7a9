"""Engine, sessions and schema creation.

Nothing here touches Settings or opens a connection at import; the
application engine is built on first use so tests can swap ``get_db``
before any database exists.
"""

from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from esg_api.config import Settings

SQLITE_FILE_PREFIX = "sqlite:///"


class Base(DeclarativeBase):
    pass


def _ensure_sqlite_dir(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    if not database_url.startswith(SQLITE_FILE_PREFIX) or ":memory:" in database_url:
        return
    Path(database_url[len(SQLITE_FILE_PREFIX):]).parent.mkdir(parents=True, exist_ok=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE rules unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False):
    """Create an engine; SQLite connections may be shared across FastAPI's worker threads."""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    _ensure_sqlite_dir(database_url)
    engine = create_engine(database_url, echo=echo, connect_args={"check_same_thread": False})
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


# ── application singletons, built on first access ───────────────────────

_engine = None
_session_factory = None


def _get_engine():
    global _engine
    if _engine is None:
        settings = Settings()
        _engine = build_engine(settings.database_url, echo=settings.debug)
    return _engine


def _get_session_factory():
    global _session_factory
    if _session_factory is None:
        _session_factory = build_session_factory(_get_engine())
    return _session_factory


def get_db():
    """FastAPI dependency: one session per request, always closed."""
    db = _get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def init_db(engine=None) -> None:
    """Create missing tables on ``engine`` (the application engine by default)."""
    import esg_api.models  # noqa: F401  registers every model on Base.metadata
    Base.metadata.create_all(bind=engine or _get_engine())
