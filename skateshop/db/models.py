"""
SQLAlchemy ORM Models
Database table definitions using SQLAlchemy ORM.
"""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy import (
    Column, String, Integer, Float, TIMESTAMP, ForeignKey, Numeric, Text, JSON
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid4())


class Store(Base):
    """
    Store model.

    A seller's storefront; owns its products.
    """
    __tablename__ = 'stores'

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    products = relationship("Product", back_populates="store", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Store(id={self.id}, name={self.name})>"


class Product(Base):
    """
    Product model.

    Created by the add-product mutation. Images are stored inline as a
    JSON list of {id, name, url} references to the upload service.
    """
    __tablename__ = 'products'

    id = Column(String(36), primary_key=True, default=_new_id)
    store_id = Column(String(36), ForeignKey('stores.id', ondelete='CASCADE'),
                      nullable=False, index=True)

    name = Column(String(255), nullable=False, unique=True,
                  comment='Product names are unique across the shop')
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False, index=True,
                      comment='One of ProductCategory')

    price = Column(Numeric(10, 2), nullable=False, server_default='0')
    quantity = Column(Integer, nullable=False, server_default='1')
    inventory = Column(Integer, nullable=False, server_default='0')
    rating = Column(Float, nullable=False, server_default='0')

    images = Column(JSON, nullable=False, default=list,
                    comment='Uploaded images: [{id, name, url}]')

    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    store = relationship("Store", back_populates="products")

    def __repr__(self):
        return f"<Product(id={self.id}, name={self.name}, store_id={self.store_id})>"
