"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from skateshop.db.models import Base
from skateshop.models.product import StagedFile
from skateshop.scripts.create_store import create_store


@pytest.fixture
def db_session_factory():
    """In-memory SQLite database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def store_id(db_session_factory):
    """ID of a store that products can be added to."""
    return create_store(db_session_factory, "Kickflip Supply", "Decks, wheels and trucks")


@pytest.fixture
def form_values():
    """Valid add-product form values, as a browser would post them."""
    return {
        "name": "Deck A",
        "description": "Maple deck, 8.25in",
        "category": "SKATEBOARD",
        "price": "49.99",
        "quantity": "10",
        "inventory": "10",
    }


@pytest.fixture
def make_image():
    """Factory for staged image files."""

    def _make(filename="deck.png", size=1024, content_type="image/png"):
        return StagedFile(filename=filename, content_type=content_type, data=b"\x89" * size)

    return _make
