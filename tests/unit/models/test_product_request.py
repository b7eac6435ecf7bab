"""
Tests for upload references and the product creation payload.
"""

import pytest
from pydantic import ValidationError

from skateshop.models.product import (
    MAX_PRODUCT_IMAGES,
    ProductCreationRequest,
    UploadedImageRef,
)
from skateshop.models.validation import validate_product_form


def _image(n):
    return UploadedImageRef.from_upload(f"productImage/{n}.png", f"https://cdn.test/{n}.png")


def test_from_upload_maps_key_to_id_and_name():
    ref = UploadedImageRef.from_upload("productImage/abc.png", "https://cdn.test/abc.png")

    assert ref.id == "productImage/abc.png"
    assert ref.name == "productImage/abc.png"
    assert ref.url == "https://cdn.test/abc.png"


@pytest.mark.parametrize("key, url", [("", "https://cdn.test/a.png"), ("a.png", ""), ("  ", "x")])
def test_image_ref_requires_id_and_url(key, url):
    with pytest.raises(ValidationError):
        UploadedImageRef(id=key, name=key, url=url)


def test_request_from_draft(form_values):
    draft = validate_product_form(form_values).draft

    request = ProductCreationRequest.from_draft("store-1", draft, [_image(1), _image(2)])

    assert request.store_id == "store-1"
    assert request.name == draft.name
    assert request.description == draft.description
    assert request.category == draft.category
    assert request.price == draft.price
    assert request.quantity == 10
    assert request.inventory == 10
    assert [image.id for image in request.images] == ["productImage/1.png", "productImage/2.png"]


def test_request_without_images(form_values):
    draft = validate_product_form(form_values).draft

    request = ProductCreationRequest.from_draft("store-1", draft, [])

    assert request.images == []


def test_request_rejects_too_many_images(form_values):
    draft = validate_product_form(form_values).draft
    images = [_image(n) for n in range(MAX_PRODUCT_IMAGES + 1)]

    with pytest.raises(ValidationError):
        ProductCreationRequest.from_draft("store-1", draft, images)


def test_request_requires_store(form_values):
    draft = validate_product_form(form_values).draft

    with pytest.raises(ValidationError):
        ProductCreationRequest.from_draft("", draft, [])
