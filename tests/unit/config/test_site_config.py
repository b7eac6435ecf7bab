"""
Tests for site configuration and settings.
"""

import pytest
from pydantic import ValidationError

from skateshop.api.config import APISettings
from skateshop.config.settings import Settings
from skateshop.config.site import get_site_config, site_config


def test_site_metadata():
    assert site_config.name == "Skateshop"
    assert site_config.url == "https://skateshop.vercel.app/"
    assert site_config.og_image == "https://skateshop.vercel.app/opengraph-image.png"
    assert site_config.links.github == "https://github.com/sadmann7/skateshop"


def test_navigation_entries():
    assert site_config.main_nav == ()
    assert [(item.title, item.href) for item in site_config.secondary_nav] == [
        ("Skateboards", "/skateboards"),
        ("Clothing", "/clothing"),
        ("Shoes", "/shoes"),
        ("Accessories", "/accessories"),
    ]
    assert site_config.nav_titles() == ["Skateboards", "Clothing", "Shoes", "Accessories"]


def test_site_config_is_read_only():
    with pytest.raises(ValidationError):
        site_config.name = "Other"

    with pytest.raises(ValidationError):
        site_config.secondary_nav[0].title = "Other"


def test_site_config_is_shared():
    assert get_site_config() is site_config


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GCS_BUCKET", "test-bucket")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./test.db")

    settings = Settings()

    assert settings.gcs_bucket == "test-bucket"
    assert settings.database_url == "sqlite:///./test.db"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('["http://a.test", "http://b.test"]', ["http://a.test", "http://b.test"]),
        ("http://a.test, http://b.test", ["http://a.test", "http://b.test"]),
    ],
)
def test_cors_origins_parsing(raw, expected):
    assert APISettings(cors_origins=raw).cors_origins == expected
