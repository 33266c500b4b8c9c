from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from employee_portal.core.config import settings
from employee_portal.core.logging import get_logger

logger = get_logger(__name__)


def build_engine(database_url: str = settings.DATABASE_URL, **kwargs):
    if database_url.startswith("sqlite"):
        # Sessions are used from FastAPI's threadpool
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # Verify connections before using them
        kwargs.setdefault("pool_recycle", 3600)  # Recycle connections after 1 hour
    return create_engine(database_url, echo=settings.DEBUG, **kwargs)


def create_db_and_tables(bind, *models):
    """
    Create tables for given models.

    Args:
        bind: Engine the tables are created on
        *models: SQLModel classes to create tables for
    """
    if models:
        # Create tables for specific models
        for model in models:
            model.__table__.create(bind, checkfirst=True)
        logger.info(f"Database tables created for {len(models)} model(s)")
    else:
        # Fallback: create all registered models
        SQLModel.metadata.create_all(bind)
        logger.info("Database tables created successfully")


def database_reachable(bind) -> bool:
    try:
        with bind.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return False
    return True


def get_session(request: Request):
    """Yield a session on the engine the running app was created with."""
    with Session(request.app.state.engine) as session:
        yield session
