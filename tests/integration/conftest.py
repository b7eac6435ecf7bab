"""
Integration test fixtures
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from skateshop.api.dependencies import get_session_factory, get_uploader
from skateshop.api.main import app
from skateshop.models.product import UploadedImageRef


@pytest.fixture
def fake_uploader():
    """Upload service double returning one reference per file."""
    uploader = AsyncMock()
    uploader.start_upload.side_effect = lambda channel, files: [
        UploadedImageRef.from_upload(f"{channel}/{f.filename}", f"https://cdn.test/{f.filename}")
        for f in files
    ]
    return uploader


@pytest.fixture
def test_api_client(db_session_factory, fake_uploader):
    """API client wired to the in-memory database and the fake uploader."""
    app.dependency_overrides[get_session_factory] = lambda: db_session_factory
    app.dependency_overrides[get_uploader] = lambda: fake_uploader
    yield TestClient(app)
    app.dependency_overrides.clear()
