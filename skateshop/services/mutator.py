"""
Product creation mutation.

The add-product workflow only depends on the ProductMutator interface;
DatabaseProductMutator is the implementation backed by SQLAlchemy.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..db.models import Product, Store
from ..models.product import ProductCreationRequest
from .errors import MutationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatedProduct:
    """Result of a successful product creation."""

    id: str
    name: str
    store_id: str


class ProductMutator(Protocol):
    """Remote operation that creates a product."""

    async def create_product(self, request: ProductCreationRequest) -> CreatedProduct:
        ...


class DatabaseProductMutator:
    """
    Creates products in the database.

    Rules:
    - The owning store must exist
    - Product names are unique across the shop

    Every failure is raised as MutationError with a message that can be
    shown to the user as-is.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    async def create_product(self, request: ProductCreationRequest) -> CreatedProduct:
        session = self.session_factory()
        try:
            store = session.get(Store, request.store_id)
            if store is None:
                raise MutationError("Store not found.", details={"store_id": request.store_id})

            existing = session.execute(
                select(Product.id).where(Product.name == request.name)
            ).first()
            if existing is not None:
                raise MutationError("Product name already taken.", details={"name": request.name})

            product = Product(
                store_id=request.store_id,
                name=request.name,
                description=request.description,
                category=request.category.value,
                price=request.price,
                quantity=request.quantity,
                inventory=request.inventory,
                images=[image.model_dump() for image in request.images],
            )
            session.add(product)
            session.commit()

            logger.info(
                f"Product created: id={product.id}, store={request.store_id}, "
                f"images={len(request.images)}"
            )
            return CreatedProduct(id=product.id, name=product.name, store_id=product.store_id)

        except IntegrityError as e:
            # Lost a race on the unique name constraint
            session.rollback()
            logger.warning(f"Integrity error creating product {request.name!r}: {e}")
            raise MutationError("Product name already taken.", details={"name": request.name}) from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Failed to create product: {e}", exc_info=True)
            raise MutationError("Failed to add product.") from e
        except (OverflowError, ValueError) as e:
            # Values the database driver cannot bind
            session.rollback()
            logger.error(f"Failed to store product {request.name!r}: {e}", exc_info=True)
            raise MutationError("Failed to add product.") from e
        finally:
            session.close()
