"""
Tests for add-product form validation.
"""

from decimal import Decimal

import pytest

from skateshop.models.product import ProductCategory
from skateshop.models.validation import validate_product_form


def test_valid_product(form_values):
    result = validate_product_form(form_values)

    assert result.is_valid
    assert result.errors == {}
    draft = result.draft
    assert draft.name == "Deck A"
    assert draft.category == ProductCategory.SKATEBOARD
    assert draft.price == Decimal("49.99")
    assert draft.quantity == 10
    assert draft.inventory == 10


def test_typed_values_are_accepted():
    result = validate_product_form(
        {
            "name": "Deck A",
            "category": ProductCategory.SKATEBOARD,
            "price": 49.99,
            "quantity": 10,
            "inventory": 0,
        }
    )

    assert result.is_valid
    assert result.draft.price == Decimal("49.99")
    assert result.draft.inventory == 0
    assert result.draft.description is None


@pytest.mark.parametrize(
    "field_name, message",
    [
        ("name", "Name is required"),
        ("category", "Must be a valid category"),
        ("price", "Price is required"),
        ("quantity", "Quantity is required"),
        ("inventory", "Inventory is required"),
    ],
)
def test_missing_required_field(form_values, field_name, message):
    del form_values[field_name]

    result = validate_product_form(form_values)

    assert not result.is_valid
    assert result.draft is None
    assert result.errors == {field_name: message}


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_name_is_missing(form_values, blank):
    form_values["name"] = blank

    result = validate_product_form(form_values)

    assert result.errors == {"name": "Name is required"}


def test_name_is_trimmed(form_values):
    form_values["name"] = "  Deck A  "

    assert validate_product_form(form_values).draft.name == "Deck A"


def test_description_is_optional(form_values):
    form_values["description"] = "  "

    result = validate_product_form(form_values)

    assert result.is_valid
    assert result.draft.description is None


def test_unknown_category(form_values):
    form_values["category"] = "SURFBOARD"

    assert validate_product_form(form_values).errors == {"category": "Must be a valid category"}


def test_category_is_case_insensitive(form_values):
    form_values["category"] = "shoes"

    assert validate_product_form(form_values).draft.category == ProductCategory.SHOES


@pytest.mark.parametrize(
    "price, message",
    [
        ("-1", "Must be a non-negative number"),
        ("abc", "Must be a valid price"),
        ("NaN", "Must be a valid price"),
        ("1.999", "Price can have at most 2 decimal places"),
        ("100000000", "Must be at most 99999999.99"),
    ],
)
def test_invalid_price(form_values, price, message):
    form_values["price"] = price

    assert validate_product_form(form_values).errors == {"price": message}


def test_zero_price_is_allowed(form_values):
    form_values["price"] = "0"

    assert validate_product_form(form_values).draft.price == Decimal("0")


@pytest.mark.parametrize("price", ["10.000", "1.100", "99999999.99"])
def test_trailing_zero_decimals_are_allowed(form_values, price):
    form_values["price"] = price

    assert validate_product_form(form_values).draft.price == Decimal(price)


@pytest.mark.parametrize("value", ["-1", "2.5", "ten", True])
@pytest.mark.parametrize("field_name", ["quantity", "inventory"])
def test_invalid_counts(form_values, field_name, value):
    form_values[field_name] = value

    result = validate_product_form(form_values)

    assert result.errors == {field_name: "Must be a non-negative whole number"}


@pytest.mark.parametrize("value", ["2147483648", "99999999999999999999", "1e30"])
@pytest.mark.parametrize("field_name", ["quantity", "inventory"])
def test_counts_above_column_range(form_values, field_name, value):
    form_values[field_name] = value

    result = validate_product_form(form_values)

    assert result.errors == {field_name: "Must be at most 2147483647"}


def test_largest_count_is_accepted(form_values):
    form_values["inventory"] = "2147483647"

    assert validate_product_form(form_values).draft.inventory == 2147483647


def test_whole_number_strings_are_accepted(form_values):
    form_values["quantity"] = "10.0"
    form_values["inventory"] = " 3 "

    draft = validate_product_form(form_values).draft

    assert draft.quantity == 10
    assert draft.inventory == 3


def test_all_field_errors_are_reported():
    result = validate_product_form({})

    assert set(result.errors) == {"name", "category", "price", "quantity", "inventory"}


def test_unknown_fields_are_ignored(form_values):
    form_values["storeId"] = "ignored"

    assert validate_product_form(form_values).is_valid
