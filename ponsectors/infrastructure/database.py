"""SQLAlchemy engine, session factory and declarative base."""

from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from ponsectors.config import get_settings
from ponsectors.core.exceptions import BackendUnavailableException

settings = get_settings()

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@contextmanager
def backend_errors(db: Session):
    """Translate driver connectivity failures into BackendUnavailableException."""
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        db.rollback()
        raise BackendUnavailableException(details={"reason": str(exc.orig or exc)}) from exc
