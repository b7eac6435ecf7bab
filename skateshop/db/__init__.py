"""
Database ORM Models
SQLAlchemy ORM models for database tables.
"""

from .models import Base, Product, Store

__all__ = [
    "Base",
    "Product",
    "Store",
]
