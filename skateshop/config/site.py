"""
Site configuration
Branding and navigation metadata shared by every page.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict


class NavItem(BaseModel):
    """A single navigation entry."""

    model_config = ConfigDict(frozen=True)

    title: str
    href: str


class SocialLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    twitter: str
    github: str


class SiteConfig(BaseModel):
    """
    Read-only site metadata.

    Built once at import time and shared by all consumers; instances
    are frozen so attribute assignment raises.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    url: str
    og_image: str
    main_nav: Tuple[NavItem, ...] = ()
    secondary_nav: Tuple[NavItem, ...] = ()
    links: SocialLinks

    def nav_titles(self) -> List[str]:
        """Titles of all navigation entries, main nav first."""
        return [item.title for item in (*self.main_nav, *self.secondary_nav)]


site_config = SiteConfig(
    name="Skateshop",
    description="An open source e-commerce skateshop build with everything new in Next.js",
    url="https://skateshop.vercel.app/",
    og_image="https://skateshop.vercel.app/opengraph-image.png",
    main_nav=(),
    secondary_nav=(
        NavItem(title="Skateboards", href="/skateboards"),
        NavItem(title="Clothing", href="/clothing"),
        NavItem(title="Shoes", href="/shoes"),
        NavItem(title="Accessories", href="/accessories"),
    ),
    links=SocialLinks(
        twitter="https://twitter.com/sadmann17",
        github="https://github.com/sadmann7/skateshop",
    ),
)


def get_site_config() -> SiteConfig:
    """Get the process-wide site configuration."""
    return site_config
