"""One-shot startup routine: create tables and seed the default admin."""

import logging
from threading import Lock

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from backend.auth.passwords import PasswordHasher
from backend.core import config
from backend.database import Base
from backend.models import admin, announcement, user

logger = logging.getLogger(__name__)

_bootstrap_lock = Lock()


def ensure_schema(engine: Engine) -> None:
    Base.metadata.create_all(
        bind=engine,
        tables=[user.User.__table__, admin.Admin.__table__, announcement.Announcement.__table__],
    )


def seed_default_admin(
    session_factory: sessionmaker,
    hasher: PasswordHasher,
    username: str = config.DEFAULT_ADMIN_USERNAME,
    password: str = config.DEFAULT_ADMIN_PASSWORD,
) -> bool:
    """Insert the default admin unless one with ``username`` already exists.

    Returns True when a row was inserted. An existing admin keeps its password.
    """
    db = session_factory()
    try:
        if db.query(admin.Admin).filter(admin.Admin.username == username).first() is not None:
            return False

        db.add(admin.Admin(username=username, password=hasher.hash(password)))
        try:
            db.commit()
        except IntegrityError:
            # Another process seeded it first.
            db.rollback()
            return False
        logger.info("Seeded default admin account '%s'", username)
        return True
    finally:
        db.close()


def initialize_database(engine: Engine, session_factory: sessionmaker, hasher: PasswordHasher) -> None:
    """Create missing tables and seed the default admin.

    Safe to call repeatedly. Store failures are logged and do not propagate so
    the API still starts when the database is unreachable.
    """
    with _bootstrap_lock:
        try:
            ensure_schema(engine)
            seed_default_admin(session_factory, hasher)
            logger.info("Database tables initialized")
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL and Postgres credentials.')
