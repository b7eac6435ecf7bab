#!/usr/bin/env python3
"""
Create Store Script
Creates a store that products can be added to.

Usage:
    python -m skateshop.scripts.create_store "Kickflip Supply" --description "Decks and wheels"
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skateshop.db.models import Store
from skateshop.db.session import SessionLocal, init_db

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_store(
    session_factory: Callable[[], Session], name: str, description: Optional[str] = None
) -> str:
    """Insert a store and return its ID."""
    session = session_factory()
    try:
        store = Store(name=name, description=description)
        session.add(store)
        session.commit()
        return store.id
    except SQLAlchemyError:
        session.rollback()
        raise
    finally:
        session.close()


def main(argv=None):
    """Main function to create a store."""
    parser = argparse.ArgumentParser(description="Create a store")
    parser.add_argument("name", type=str, help="Store name")
    parser.add_argument("--description", type=str, default=None, help="Store description")
    parser.add_argument(
        "--skip-init", action="store_true", help="Do not create missing tables first"
    )

    args = parser.parse_args(argv)

    if not args.name.strip():
        logger.error("Store name must not be empty")
        sys.exit(1)

    try:
        if not args.skip_init:
            init_db()

        store_id = create_store(SessionLocal, args.name.strip(), args.description)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create store: {e}")
        sys.exit(1)

    logger.info(f"Store created: {args.name} (ID: {store_id})")
    print(store_id)


if __name__ == "__main__":
    main()
