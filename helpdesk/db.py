from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from helpdesk.core.config import Settings
from helpdesk import models  # noqa: F401  registers tables on SQLModel.metadata

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> Engine:
    connect_args = {}
    is_sqlite = settings.DATABASE_URL.startswith("sqlite")
    if is_sqlite:
        connect_args = {"check_same_thread": False}
    engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_db(engine: Engine) -> None:
    """Create tables and indexes that do not exist yet."""
    SQLModel.metadata.create_all(bind=engine)
    logger.info(f"Database schema ensured on {engine.url.render_as_string(hide_password=True)}")


def get_session(request: Request) -> Generator[Session, None, None]:
    with Session(request.app.state.engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]
