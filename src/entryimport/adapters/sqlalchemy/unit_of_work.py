"""SQLAlchemy-backed unit of work for the local catalog."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from entryimport.adapters.sqlalchemy.mappings import create_all_tables
from entryimport.adapters.sqlalchemy.repositories import SqlAlchemyItemRepository
from entryimport.config.storage import get_database_config
from entryimport.domain.ports.unit_of_work import CatalogRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the catalog database is used before ``startup()`` or reconfigured twice."""


_engine: Engine | None = None
_sessions: sessionmaker[Session] | None = None


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the catalog to ``engine`` (or a new engine for ``database_uri``) and create tables.

    Without either argument the URI comes from ``get_database_config()``.
    """

    global _engine, _sessions  # noqa: PLW0603
    if _engine is not None and not force:
        raise StartupError("Catalog database already started. Pass force=True to rebind it.")

    bound = engine or create_engine(database_uri or get_database_config().uri)
    create_all_tables(bound)
    _engine = bound
    _sessions = sessionmaker(bind=bound, expire_on_commit=False)
    log.debug("Catalog database bound to %s", bound.url)


def is_started() -> bool:
    return _engine is not None


def shutdown() -> None:
    """Dispose the bound engine; used between tests."""

    global _engine, _sessions  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _sessions = None


class SqlAlchemyCatalogUnitOfWork:
    """One session over the catalog tables, rolled back when the block raises."""

    def __init__(self) -> None:
        if _sessions is None:
            raise StartupError(
                "Catalog database not started. Call "
                "entryimport.adapters.sqlalchemy.startup() first."
            )
        self._sessions = _sessions
        self._session: Session | None = None
        self._repositories: CatalogRepositories | None = None

    def __enter__(self) -> SqlAlchemyCatalogUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = self._sessions()
        self._repositories = CatalogRepositories(items=SqlAlchemyItemRepository(self._session))
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        try:
            if exc_type is not None:
                session.rollback()
        finally:
            session.close()
            self._session = None
            self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session

    @property
    def repositories(self) -> CatalogRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not open")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from entryimport.domain.ports.unit_of_work import CatalogUnitOfWork

    _uow_check: CatalogUnitOfWork = SqlAlchemyCatalogUnitOfWork()
