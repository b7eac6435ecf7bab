"""
Form validation for the add-product form.
Turns raw form values into a ProductDraft or a per-field error mapping.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from .product import FIELD_LABELS, ProductDraft

logger = logging.getLogger(__name__)

FORM_FIELDS = tuple(FIELD_LABELS)


@dataclass
class FormValidationResult:
    """Outcome of validating the form: a draft, or field errors."""

    draft: Optional[ProductDraft] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.draft is not None and not self.errors


def validate_product_form(raw: Mapping[str, Any]) -> FormValidationResult:
    """
    Validate raw add-product form values.

    Missing keys are treated like empty inputs so every required field
    reports its own message. Only the first message per field is kept.

    Args:
        raw: Field name -> raw value (unknown keys are ignored)

    Returns:
        FormValidationResult with either a draft or field errors
    """
    data = {name: raw.get(name) for name in FORM_FIELDS}

    try:
        draft = ProductDraft(**data)
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for error in e.errors():
            loc = error.get("loc") or ("form",)
            errors.setdefault(str(loc[0]), error["msg"])

        logger.debug(f"Form validation failed: {sorted(errors)}")
        return FormValidationResult(errors=errors)

    return FormValidationResult(draft=draft)
