from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from entryimport.adapters.sqlalchemy import create_all_tables
from entryimport.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    shutdown,
    startup,
)

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    # one shared connection so lookups running in worker threads see the same database
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyCatalogUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)
    try:
        yield SqlAlchemyCatalogUnitOfWork
    finally:
        shutdown()
