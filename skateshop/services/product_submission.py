"""
Product Submission Workflow
Runs the add-product form submit: validate, upload images, create product.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..models.form import Notification, ProductFormState, SubmissionState
from ..models.product import ProductCreationRequest, UploadedImageRef
from ..models.validation import validate_product_form
from .errors import MutationError, SubmissionError, UploadError
from .mutator import ProductMutator
from .notifications import NotificationCenter
from .uploader import PRODUCT_IMAGE_CHANNEL, Uploader

logger = logging.getLogger(__name__)

UPLOAD_LOADING_MESSAGE = "Uploading images..."
UPLOAD_SUCCESS_MESSAGE = "Images uploaded successfully."
UPLOAD_ERROR_MESSAGE = "Failed to upload images."
PRODUCT_ADDED_MESSAGE = "Product added successfully"


@dataclass
class SubmissionOutcome:
    """What one submit produced."""

    state: SubmissionState
    field_errors: Dict[str, str] = field(default_factory=dict)
    product_id: Optional[str] = None
    error: Optional[str] = None
    exception: Optional[SubmissionError] = None
    notifications: List[Notification] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.state == SubmissionState.SUCCESS


class ProductSubmissionWorkflow:
    """
    Submit handler of the add-product form.

    States: IDLE -> VALIDATING -> UPLOADING (only with staged files)
    -> SUBMITTING -> SUCCESS | ERROR.

    - Field errors send the form back to IDLE without any network call
    - An upload failure ends in ERROR before the mutation is called
    - A mutation failure ends in ERROR and keeps the entered values
    - Success resets the form, staged files included

    The loading flag is on from the end of validation until the
    workflow stops, whatever the outcome. Nothing prevents a second
    submit while one is running.
    """

    def __init__(
        self,
        store_id: str,
        uploader: Uploader,
        mutator: ProductMutator,
        notifier: Optional[NotificationCenter] = None,
        channel: str = PRODUCT_IMAGE_CHANNEL,
    ):
        self.store_id = store_id
        self.uploader = uploader
        self.mutator = mutator
        self.notifier = notifier or NotificationCenter()
        self.channel = channel

    def _transition(self, form: ProductFormState, state: SubmissionState) -> None:
        logger.debug(f"Submission {form.state.value} -> {state.value} (store={self.store_id})")
        form.state = state

    async def submit(
        self, form: ProductFormState, values: Optional[Mapping[str, Any]] = None
    ) -> SubmissionOutcome:
        """
        Run one submission of the form.

        Args:
            form: Form state; read for staged files and updated in place
            values: Raw field values; defaults to the values already on the form

        Returns:
            SubmissionOutcome describing the terminal state
        """
        first_notification = len(self.notifier.notifications)

        if values is not None:
            form.values = dict(values)

        self._transition(form, SubmissionState.VALIDATING)
        result = validate_product_form(form.values)
        form.field_errors = dict(result.errors)

        if not result.is_valid:
            self._transition(form, SubmissionState.IDLE)
            return SubmissionOutcome(
                state=form.state,
                field_errors=dict(result.errors),
                notifications=self.notifier.notifications[first_notification:],
            )

        form.is_loading = True
        try:
            images = await self._upload_images(form)

            self._transition(form, SubmissionState.SUBMITTING)
            request = ProductCreationRequest.from_draft(self.store_id, result.draft, images)
            created = await self.mutator.create_product(request)

        except UploadError as e:
            self._transition(form, SubmissionState.ERROR)
            return SubmissionOutcome(
                state=form.state,
                error=e.message,
                exception=e,
                notifications=self.notifier.notifications[first_notification:],
            )

        except MutationError as e:
            self.notifier.error(e.message)
            self._transition(form, SubmissionState.ERROR)
            return SubmissionOutcome(
                state=form.state,
                error=e.message,
                exception=e,
                notifications=self.notifier.notifications[first_notification:],
            )

        finally:
            form.is_loading = False

        self.notifier.success(PRODUCT_ADDED_MESSAGE)
        form.reset()
        self._transition(form, SubmissionState.SUCCESS)

        return SubmissionOutcome(
            state=form.state,
            product_id=created.id,
            notifications=self.notifier.notifications[first_notification:],
        )

    async def _upload_images(self, form: ProductFormState) -> List[UploadedImageRef]:
        """Upload staged files; no upload call at all when none are staged."""
        if not form.staged_files:
            return []

        self._transition(form, SubmissionState.UPLOADING)
        files = list(form.staged_files)

        async def _upload() -> List[UploadedImageRef]:
            images = await self.uploader.start_upload(self.channel, files)
            if len(images) != len(files):
                raise UploadError(
                    UPLOAD_ERROR_MESSAGE,
                    details={"staged": len(files), "uploaded": len(images)},
                )
            return list(images)

        try:
            return await self.notifier.track(
                _upload(),
                loading=UPLOAD_LOADING_MESSAGE,
                success=UPLOAD_SUCCESS_MESSAGE,
                error=UPLOAD_ERROR_MESSAGE,
            )
        except UploadError:
            raise
        except Exception as e:
            logger.error(f"Upload service failed: {e}", exc_info=True)
            raise UploadError(UPLOAD_ERROR_MESSAGE) from e
