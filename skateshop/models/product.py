"""
Product models for the add-product form.
Covers the validated draft, staged image files, upload results
and the creation payload sent to the product mutation.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

MAX_PRODUCT_IMAGES = 3
MAX_IMAGE_SIZE_BYTES = 4 * 1024 * 1024  # 4 MiB

# Column limits: products.price is Numeric(10, 2), counts are 32-bit Integer
MAX_PRICE = Decimal("99999999.99")
MAX_COUNT = 2_147_483_647

# Field labels used in "<Label> is required" messages
FIELD_LABELS = {
    "name": "Name",
    "description": "Description",
    "category": "Category",
    "price": "Price",
    "quantity": "Quantity",
    "inventory": "Inventory",
}


class ProductCategory(str, Enum):
    """Product categories offered by the store."""

    SKATEBOARD = "SKATEBOARD"
    CLOTHING = "CLOTHING"
    SHOES = "SHOES"
    ACCESSORIES = "ACCESSORIES"

    @classmethod
    def values(cls) -> List[str]:
        return [category.value for category in cls]


def _is_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _required(field_name: str) -> PydanticCustomError:
    return PydanticCustomError(
        "required", "{label} is required", {"label": FIELD_LABELS[field_name]}
    )


class ProductDraft(BaseModel):
    """
    Validated values of the add-product form.

    Accepts raw form values (strings from a multipart body or already
    typed values) and normalizes them. Every failure carries a
    user-facing message so the caller can show it next to the field.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str
    description: Optional[str] = None
    category: ProductCategory
    price: Decimal
    quantity: int
    inventory: int

    # === VALIDATORS ===

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        """Name must be present and non-empty after trimming."""
        if _is_blank(v):
            raise _required("name")
        return str(v)

    @field_validator("description", mode="before")
    @classmethod
    def clean_description(cls, v):
        """Blank descriptions are stored as None."""
        if _is_blank(v):
            return None
        return str(v)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        """Category must be one of ProductCategory (case-insensitive)."""
        if isinstance(v, ProductCategory):
            return v
        if _is_blank(v) or str(v).strip().upper() not in ProductCategory.values():
            raise PydanticCustomError("category", "Must be a valid category")
        return ProductCategory(str(v).strip().upper())

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        """Price must be a non-negative amount with at most two decimals."""
        if _is_blank(v):
            raise _required("price")
        if isinstance(v, bool):
            raise PydanticCustomError("price", "Must be a valid price")

        try:
            price = Decimal(str(v).strip())
        except InvalidOperation:
            raise PydanticCustomError("price", "Must be a valid price")

        if not price.is_finite():
            raise PydanticCustomError("price", "Must be a valid price")
        if price < 0:
            raise PydanticCustomError("price", "Must be a non-negative number")
        if price > MAX_PRICE:
            raise PydanticCustomError(
                "price", "Must be at most {limit}", {"limit": str(MAX_PRICE)}
            )
        if price != price.quantize(Decimal("0.01")):
            raise PydanticCustomError("price", "Price can have at most 2 decimal places")

        return price

    @field_validator("quantity", "inventory", mode="before")
    @classmethod
    def validate_count(cls, v, info: ValidationInfo):
        """Counts must be non-negative whole numbers."""
        if _is_blank(v):
            raise _required(info.field_name)
        if isinstance(v, bool):
            raise PydanticCustomError("count", "Must be a non-negative whole number")

        try:
            count = Decimal(str(v).strip())
        except InvalidOperation:
            raise PydanticCustomError("count", "Must be a non-negative whole number")

        if not count.is_finite() or count < 0 or count != count.to_integral_value():
            raise PydanticCustomError("count", "Must be a non-negative whole number")
        if count > MAX_COUNT:
            raise PydanticCustomError("count", "Must be at most {limit}", {"limit": MAX_COUNT})

        return int(count)


@dataclass(frozen=True)
class StagedFile:
    """A locally selected file that has not been uploaded yet."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class UploadedImageRef(BaseModel):
    """Reference to an image stored by the upload service."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    url: str = Field(..., min_length=1)

    @classmethod
    def from_upload(cls, key: str, url: str) -> "UploadedImageRef":
        """Map an upload result (object key + public URL) to an image reference."""
        return cls(id=key, name=key, url=url)


class ProductCreationRequest(BaseModel):
    """
    Payload of the product creation mutation.

    The validated draft plus the owning store and the uploaded images.
    """

    store_id: str = Field(..., min_length=1)
    name: str
    description: Optional[str] = None
    category: ProductCategory
    price: Decimal = Field(..., ge=0, le=MAX_PRICE)
    quantity: int = Field(..., ge=0, le=MAX_COUNT)
    inventory: int = Field(..., ge=0, le=MAX_COUNT)
    images: List[UploadedImageRef] = Field(default_factory=list, max_length=MAX_PRODUCT_IMAGES)

    @classmethod
    def from_draft(
        cls, store_id: str, draft: ProductDraft, images: List[UploadedImageRef]
    ) -> "ProductCreationRequest":
        """Create the payload from a validated draft."""
        return cls(
            store_id=store_id,
            name=draft.name,
            description=draft.description,
            category=draft.category,
            price=draft.price,
            quantity=draft.quantity,
            inventory=draft.inventory,
            images=list(images),
        )
