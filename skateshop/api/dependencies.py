"""
Dependency Injection
FastAPI dependencies for the upload service, the product mutation and request metadata.
"""

import logging
from typing import Callable, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from ..config.settings import Settings, get_settings as get_core_settings
from ..config.site import SiteConfig, get_site_config
from ..db.session import SessionLocal
from ..services.mutator import DatabaseProductMutator, ProductMutator
from ..services.notifications import NotificationCenter
from ..services.uploader import GCSUploader, Uploader

logger = logging.getLogger(__name__)

_uploader: Optional[GCSUploader] = None


def get_session_factory() -> Callable[[], Session]:
    """Get database session factory."""
    return SessionLocal


def get_uploader(settings: Settings = Depends(get_core_settings)) -> Uploader:
    """
    Get the image upload service (singleton).

    Use as FastAPI dependency:
        @app.post("/endpoint")
        async def endpoint(uploader: Uploader = Depends(get_uploader)):
            ...
    """
    global _uploader
    if _uploader is None:
        _uploader = GCSUploader(
            bucket_name=settings.gcs_bucket,
            public_base_url=settings.gcs_public_base_url,
        )
        logger.info(f"GCS uploader created for bucket {settings.gcs_bucket}")
    return _uploader


def get_mutator(
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> ProductMutator:
    """Get the product creation mutation."""
    return DatabaseProductMutator(session_factory=session_factory)


def get_notifier() -> NotificationCenter:
    """Fresh notification channel per request."""
    return NotificationCenter()


def get_site() -> SiteConfig:
    return get_site_config()


def get_request_id(
    request: Request, x_request_id: Optional[str] = Header(None)
) -> str:
    """
    Get request ID for tracing.

    Prefers the ID assigned by the logging middleware, then the header.
    """
    return getattr(request.state, "request_id", None) or x_request_id or "-"
