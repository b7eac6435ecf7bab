"""
Tests for staging images on the add-product form.
"""

import pytest

from skateshop.models.form import ProductFormState
from skateshop.models.product import MAX_IMAGE_SIZE_BYTES
from skateshop.services.errors import StagingError
from skateshop.services.file_staging import clear_staged_files, remove_staged_file, stage_files
from skateshop.services.notifications import NotificationCenter


@pytest.fixture
def form():
    return ProductFormState()


@pytest.fixture
def notifier():
    return NotificationCenter()


def test_stage_files_keeps_order(form, notifier, make_image):
    files = [make_image("a.png"), make_image("b.jpg", content_type="image/jpeg")]

    rejections = stage_files(form, files, notifier)

    assert rejections == []
    assert [f.filename for f in form.staged_files] == ["a.png", "b.jpg"]
    assert notifier.notifications == []


def test_stage_files_limits_count(form, notifier, make_image):
    stage_files(form, [make_image("a.png"), make_image("b.png")], notifier)

    rejections = stage_files(form, [make_image("c.png"), make_image("d.png")], notifier)

    assert [f.filename for f in form.staged_files] == ["a.png", "b.png", "c.png"]
    assert rejections == ["d.png: at most 3 files allowed"]
    assert notifier.messages() == rejections


def test_stage_files_rejects_large_file(form, notifier, make_image):
    rejections = stage_files(form, [make_image("big.png", size=MAX_IMAGE_SIZE_BYTES + 1)], notifier)

    assert form.staged_files == []
    assert rejections == ["big.png: file is larger than 4 MB"]


def test_stage_files_accepts_file_at_size_limit(form, notifier, make_image):
    stage_files(form, [make_image("edge.png", size=MAX_IMAGE_SIZE_BYTES)], notifier)

    assert len(form.staged_files) == 1


def test_stage_files_rejects_non_images(form, notifier, make_image):
    rejections = stage_files(form, [make_image("notes.txt", content_type="text/plain")], notifier)

    assert form.staged_files == []
    assert rejections == ["notes.txt: file type must be image/*"]


def test_stage_files_rejects_empty_file(form, notifier, make_image):
    rejections = stage_files(form, [make_image("empty.png", size=0)], notifier)

    assert rejections == ["empty.png: file is empty"]


def test_staging_is_disabled_while_loading(form, notifier, make_image):
    form.is_loading = True

    with pytest.raises(StagingError):
        stage_files(form, [make_image()], notifier)
    with pytest.raises(StagingError):
        clear_staged_files(form)


def test_remove_and_clear(form, notifier, make_image):
    stage_files(form, [make_image("a.png"), make_image("b.png")], notifier)

    removed = remove_staged_file(form, 0)

    assert removed.filename == "a.png"
    assert [f.filename for f in form.staged_files] == ["b.png"]

    with pytest.raises(StagingError):
        remove_staged_file(form, 5)

    clear_staged_files(form)
    assert form.staged_files == []
