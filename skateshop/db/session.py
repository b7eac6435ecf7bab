"""
Database Session
Provides the engine and session factory used by the product mutation.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..config.settings import get_settings
from .models import Base

logger = logging.getLogger(__name__)

settings = get_settings()

# SQLite connections must be shareable across the threads FastAPI uses
_connect_args = (
    {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
)

engine = create_engine(
    settings.database_url,
    connect_args=_connect_args,
    pool_pre_ping=True,  # Verify connections before using
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured")
