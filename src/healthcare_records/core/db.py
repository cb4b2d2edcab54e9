import logging
from pathlib import Path
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from healthcare_records.core.config import DATABASE_URL
from healthcare_records.models.tables import Base

log = logging.getLogger(__name__)

def _ensure_sqlite_dir(url) -> None:
    """SQLite creates the file but not its folder."""
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

def get_engine(url: str | None = None) -> Engine:
    url = make_url(url or DATABASE_URL)
    try:
        _ensure_sqlite_dir(url)
        return create_engine(url, echo=False, future=True)
    except SQLAlchemyError as e:
        log.error("Failed to create engine for %s: %s", url.render_as_string(hide_password=True), e)
        raise

def create_tables(engine: Engine | None = None) -> Engine:
    """Create missing record tables (idempotent)."""
    engine = engine or get_engine()
    existing = set(inspect(engine).get_table_names())
    expected = set(Base.metadata.tables.keys())

    missing = sorted(expected - existing)
    if not missing:
        log.info("All record tables exist. Skipping creation.")
        return engine

    log.info("Creating tables: %s", ", ".join(missing))
    Base.metadata.create_all(engine)
    log.info("Tables created.")
    return engine
