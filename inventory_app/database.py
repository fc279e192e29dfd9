import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_app.exceptions import ConflictError, StoreError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and session factory for one application instance.

    Opened when the application starts and disposed when it shuts down, so
    tests can build as many isolated instances as they like.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        engine_kwargs = {"echo": echo}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False, "timeout": 30}
            # In-memory databases exist per connection; share the one connection.
            if url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(url, **engine_kwargs)
        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        # Import all models so Base.metadata knows about them
        import inventory_app.models.category  # noqa: F401
        import inventory_app.models.inventory_log  # noqa: F401
        import inventory_app.models.product  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def session(self) -> Session:
        return self.SessionLocal()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session, conflict_message: str | None = None) -> Iterator[Session]:
    """Commit on success, roll back on every other exit path.

    Driver errors come out as StoreError, or as ConflictError when the caller
    passes `conflict_message` and the failure is a constraint violation.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if conflict_message:
            raise ConflictError(conflict_message) from exc
        logger.error("Integrity error: %s", exc.orig)
        raise StoreError("Database constraint violated", error=str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Database error: %s", exc)
        raise StoreError("Database error", error=str(exc)) from exc
    except Exception:
        db.rollback()
        raise
