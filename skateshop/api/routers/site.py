"""
Site Endpoint
GET /api/v1/site - Branding and navigation metadata.
"""

from fastapi import APIRouter, Depends

from ...config.site import SiteConfig
from ..dependencies import get_site

router = APIRouter(prefix="/api/v1", tags=["site"])


@router.get("/site", response_model=SiteConfig)
async def get_site_metadata(site: SiteConfig = Depends(get_site)) -> SiteConfig:
    """Return the site name, description, URLs and navigation entries."""
    return site
