"""
Form state for the add-product form.
Holds what the page renders: entered values, field errors,
staged files, the loading flag and the workflow state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from .product import StagedFile


class SubmissionState(str, Enum):
    """Workflow states of a product submission."""

    IDLE = "idle"
    VALIDATING = "validating"
    UPLOADING = "uploading"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class NotificationKind(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A transient user-facing message."""

    kind: NotificationKind
    message: str
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


@dataclass
class ProductFormState:
    """
    Mutable state of one add-product form.

    Only the submission workflow and the staging helpers write to it;
    the rendering layer reads it.
    """

    values: Dict[str, Any] = field(default_factory=dict)
    field_errors: Dict[str, str] = field(default_factory=dict)
    staged_files: List[StagedFile] = field(default_factory=list)
    is_loading: bool = False
    state: SubmissionState = SubmissionState.IDLE

    def reset(self) -> None:
        """Return the form to its empty initial state."""
        self.values = {}
        self.field_errors = {}
        self.staged_files = []
        self.is_loading = False
