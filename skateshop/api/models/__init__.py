"""
Pydantic Models
Request/response models for API endpoints.
"""

from .products import CategoriesResponse, NotificationOut, ProductSubmissionResponse

__all__ = [
    "CategoriesResponse",
    "NotificationOut",
    "ProductSubmissionResponse",
]
