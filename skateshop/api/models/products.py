"""
Product Models
Pydantic models for the add-product endpoint.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ...models.form import Notification
from ...services.product_submission import SubmissionOutcome


class NotificationOut(BaseModel):
    """A notification to display after the request."""

    kind: str = Field(..., description="loading, success or error")
    message: str

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationOut":
        return cls(kind=notification.kind.value, message=notification.message)


class ProductSubmissionResponse(BaseModel):
    """
    Result of submitting the add-product form.

    Always carries the notifications and field errors so the client can
    render them, whatever the outcome.
    """

    success: bool
    state: str = Field(..., description="Terminal workflow state")
    product_id: Optional[str] = Field(None, description="ID of the created product")
    error: Optional[str] = Field(None, description="Upload or mutation error message")
    field_errors: Dict[str, str] = Field(default_factory=dict)
    notifications: List[NotificationOut] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "state": "success",
                "product_id": "0b6a5c0e-4a7c-4f44-9d7c-2e1cbe6f8f52",
                "error": None,
                "field_errors": {},
                "notifications": [
                    {"kind": "success", "message": "Product added successfully"}
                ],
            }
        }

    @classmethod
    def from_outcome(cls, outcome: SubmissionOutcome) -> "ProductSubmissionResponse":
        return cls(
            success=outcome.succeeded,
            state=outcome.state.value,
            product_id=outcome.product_id,
            error=outcome.error,
            field_errors=outcome.field_errors,
            notifications=[NotificationOut.from_notification(n) for n in outcome.notifications],
        )


class CategoriesResponse(BaseModel):
    """Allowed product categories, in display order."""

    categories: List[str]
