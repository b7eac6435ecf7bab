"""
Data Models Package
Form, product and payload models for the add-product flow.
"""

from .form import Notification, NotificationKind, ProductFormState, SubmissionState
from .product import (
    MAX_IMAGE_SIZE_BYTES,
    MAX_PRODUCT_IMAGES,
    ProductCategory,
    ProductCreationRequest,
    ProductDraft,
    StagedFile,
    UploadedImageRef,
)
from .validation import FormValidationResult, validate_product_form

__all__ = [
    "MAX_IMAGE_SIZE_BYTES",
    "MAX_PRODUCT_IMAGES",
    "Notification",
    "NotificationKind",
    "ProductFormState",
    "SubmissionState",
    "ProductCategory",
    "ProductCreationRequest",
    "ProductDraft",
    "StagedFile",
    "UploadedImageRef",
    "FormValidationResult",
    "validate_product_form",
]
